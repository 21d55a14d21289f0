"""Map the running interpreter's platform onto the supported OS families."""
from __future__ import annotations

import sys
from typing import Optional

UNIX = "unix"
WINDOWS = "windows"
OTHER = "other"


def detect_os_family(platform: Optional[str] = None) -> str:
    platform = platform if platform is not None else sys.platform
    if platform.startswith("linux") or platform == "darwin":
        return UNIX
    if platform == "win32":
        return WINDOWS
    return OTHER
