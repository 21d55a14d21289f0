"""Locate a SumatraPDF executable for silent printing on Windows."""
from __future__ import annotations

import logging
import os
import shutil
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

SUMATRA_EXE = "SumatraPDF.exe"
SUMATRA_INSTALL_PATHS = (
    r"C:\Program Files\SumatraPDF\SumatraPDF.exe",
    r"C:\Program Files (x86)\SumatraPDF\SumatraPDF.exe",
)


def sumatra_candidates(configured: Optional[str] = None) -> list[str]:
    """Candidates in lookup order: configured path, bare name, install paths."""
    candidates = [configured] if configured else []
    candidates.append(SUMATRA_EXE)
    candidates.extend(SUMATRA_INSTALL_PATHS)
    return candidates


def is_path_like(candidate: str) -> bool:
    return ":" in candidate or candidate.startswith(("\\", "/"))


class ViewerResolver:
    """Resolve the first existing candidate.

    Path-like candidates are checked with `exists`; bare names are looked up on
    the search path with `which`. Both are injectable so lookups can be faked.
    """

    def __init__(
        self,
        candidates: Sequence[str],
        exists: Callable[[str], bool] = os.path.isfile,
        which: Callable[[str], Optional[str]] = shutil.which,
    ) -> None:
        self.candidates = list(candidates)
        self._exists = exists
        self._which = which

    def locate(self, candidate: str) -> Optional[str]:
        if is_path_like(candidate):
            return candidate if self._exists(candidate) else None
        return self._which(candidate)

    def resolve(self) -> Optional[str]:
        for candidate in self.candidates:
            try:
                found = self.locate(candidate)
            except OSError as e:
                logger.debug("Lookup of %s failed: %s", candidate, e)
                continue
            if found:
                logger.debug("Using viewer %s", found)
                return found
        return None
