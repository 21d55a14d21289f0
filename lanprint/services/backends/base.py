"""Common interface for the OS print mechanisms."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from lanprint.models import PrintOutcome, PrintRequest
from lanprint.services.commands import CommandError, CommandRunner, format_command, run_command

logger = logging.getLogger(__name__)


class PrintBackend(ABC):
    """One concrete way of handing a file to a printer.

    Subclasses build the command for a request; `attempt` runs it and turns the
    result into a PrintOutcome. `applies` lets a backend opt out (tool missing,
    unsupported file type) so the dispatcher moves on without trying it.
    """

    name: str = ""

    def __init__(self, runner: CommandRunner = run_command) -> None:
        self._runner = runner

    async def applies(self, request: PrintRequest) -> bool:
        return True

    @abstractmethod
    def build_command(self, request: PrintRequest) -> list[str]:
        raise NotImplementedError

    async def command_for(self, request: PrintRequest) -> list[str]:
        return self.build_command(request)

    async def attempt(self, request: PrintRequest) -> PrintOutcome:
        try:
            argv = await self.command_for(request)
            logger.info("Printing via %s: %s", self.name, format_command(argv))
            out = await self._runner(argv)
        except CommandError as e:
            logger.warning("%s failed: %s", self.name, e)
            return PrintOutcome.failed(str(e), method=self.name)
        logger.info("%s accepted %s: %s", self.name, request.file_path, out)
        return PrintOutcome.ok(self.name, out)
