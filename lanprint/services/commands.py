"""Run external programs without blocking the event loop."""
from __future__ import annotations

import asyncio
import logging
import shlex
import subprocess
import sys
from typing import Awaitable, Callable, Sequence

logger = logging.getLogger(__name__)

# Signature shared by run_command and the fakes used in tests
CommandRunner = Callable[[Sequence[str]], Awaitable[str]]


class CommandError(RuntimeError):
    """An external program could not be started or exited non-zero."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


def format_command(argv: Sequence[str]) -> str:
    """Render an argument vector as a shell-safe string (for logs only)."""
    return shlex.join(str(a) for a in argv)


async def run_command(argv: Sequence[str]) -> str:
    """Run *argv* to completion and return its trimmed stdout.

    Raises CommandError when the program is missing or exits non-zero; the
    message is the program's trimmed stderr when it wrote any. There is no
    timeout: a hung program hangs the caller.
    """
    argv = [str(a) for a in argv]
    kwargs = {}
    if sys.platform == "win32":
        kwargs["creationflags"] = subprocess.CREATE_NO_WINDOW

    logger.debug("exec: %s", format_command(argv))
    try:
        proc = await asyncio.create_subprocess_exec(
            *argv,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            **kwargs,
        )
        stdout, stderr = await proc.communicate()
    except OSError as e:
        raise CommandError(f"{argv[0]}: {e.strerror or e}") from e

    out = stdout.decode(errors="replace").strip()
    err = stderr.decode(errors="replace").strip()
    if proc.returncode != 0:
        raise CommandError(
            err or f"{argv[0]} exited with status {proc.returncode}",
            returncode=proc.returncode,
        )
    return out
