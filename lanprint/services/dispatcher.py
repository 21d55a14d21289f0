"""Pick an OS print mechanism for a file, falling back when one fails."""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from lanprint.models import PrintOutcome, PrintRequest
from lanprint.services.backends import (
    LpBackend,
    LprBackend,
    PowerShellBackend,
    PrintBackend,
    SumatraBackend,
)
from lanprint.services.commands import CommandRunner, run_command
from lanprint.services.platforms import UNIX, WINDOWS, detect_os_family
from lanprint.services.viewer import ViewerResolver, sumatra_candidates

logger = logging.getLogger(__name__)

UNSUPPORTED_PLATFORM = "Unsupported platform"


def backends_for(
    os_family: str,
    sumatra_path: Optional[str] = None,
    runner: CommandRunner = run_command,
    resolver: Optional[ViewerResolver] = None,
) -> list[PrintBackend]:
    """Backends for an OS family, in preference order."""
    if os_family == UNIX:
        return [LpBackend(runner), LprBackend(runner)]
    if os_family == WINDOWS:
        resolver = resolver or ViewerResolver(sumatra_candidates(sumatra_path))
        return [SumatraBackend(resolver, runner), PowerShellBackend(runner)]
    return []


class PrintDispatcher:
    def __init__(self, backends: Sequence[PrintBackend]) -> None:
        self.backends = list(backends)

    async def print_file(self, request: PrintRequest) -> PrintOutcome:
        """Try each applicable backend in order; return the first success.

        Never raises. When every backend fails the outcome carries the last
        attempted backend's name and error.
        """
        if not self.backends:
            return PrintOutcome.failed(UNSUPPORTED_PLATFORM)

        logger.info(
            "Print %s -> %s (%d cop%s)",
            request.file_path,
            request.printer_name or "<default>",
            request.copies,
            "y" if request.copies == 1 else "ies",
        )

        outcome = None
        for backend in self.backends:
            try:
                if not await backend.applies(request):
                    logger.debug("%s not applicable, skipping", backend.name)
                    continue
                outcome = await backend.attempt(request)
            except Exception as e:
                logger.exception("%s raised unexpectedly", backend.name)
                outcome = PrintOutcome.failed(str(e), method=backend.name)
            if outcome.success:
                return outcome

        if outcome is None:
            return PrintOutcome.failed("No print method available")
        logger.error("All print methods failed, last error: %s", outcome.error)
        return outcome


def get_dispatcher(
    sumatra_path: Optional[str] = None,
    os_family: Optional[str] = None,
    runner: CommandRunner = run_command,
) -> PrintDispatcher:
    os_family = os_family or detect_os_family()
    return PrintDispatcher(backends_for(os_family, sumatra_path=sumatra_path, runner=runner))
