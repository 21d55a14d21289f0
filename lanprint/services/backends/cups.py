"""CUPS command-line submission (Linux and macOS)."""
from __future__ import annotations

from lanprint.models import PrintRequest
from lanprint.services.backends.base import PrintBackend


class LpBackend(PrintBackend):
    """`lp [-d printer] [-n copies] file`"""

    name = "lp"

    def build_command(self, request: PrintRequest) -> list[str]:
        argv = ["lp"]
        if request.printer_name:
            argv += ["-d", request.printer_name]
        if request.copies > 1:
            argv += ["-n", str(request.copies)]
        argv.append(request.file_path)
        return argv


class LprBackend(PrintBackend):
    """`lpr [-# copies] [-P printer] file`, for hosts where lp is missing or broken."""

    name = "lpr"

    def build_command(self, request: PrintRequest) -> list[str]:
        argv = ["lpr"]
        if request.copies > 1:
            argv += ["-#", str(request.copies)]
        if request.printer_name:
            argv += ["-P", request.printer_name]
        argv.append(request.file_path)
        return argv
