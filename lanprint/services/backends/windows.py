"""Windows printing: SumatraPDF silent print, then the shell Print/PrintTo verbs."""
from __future__ import annotations

import asyncio
import os

from lanprint.models import PrintRequest
from lanprint.services.backends.base import PrintBackend
from lanprint.services.commands import CommandError, CommandRunner, run_command
from lanprint.services.viewer import SUMATRA_EXE, ViewerResolver

SUMATRA_EXTENSIONS = {".pdf", ".png", ".jpg", ".jpeg", ".bmp", ".tif", ".tiff", ".txt"}

# Pause between shell-verb copies so the associated application keeps up
COPY_DELAY_MS = 500


def powershell_quote(value: str) -> str:
    """Embed *value* as a PowerShell single-quoted string literal."""
    return "'" + value.replace("'", "''") + "'"


class SumatraBackend(PrintBackend):
    """Silent printing through SumatraPDF for PDFs, common images and text."""

    name = "SumatraPDF"

    def __init__(self, resolver: ViewerResolver, runner: CommandRunner = run_command) -> None:
        super().__init__(runner)
        self._resolver = resolver

    async def applies(self, request: PrintRequest) -> bool:
        ext = os.path.splitext(request.file_path)[1].lower()
        if ext not in SUMATRA_EXTENSIONS:
            return False
        return await asyncio.to_thread(self._resolver.resolve) is not None

    async def command_for(self, request: PrintRequest) -> list[str]:
        viewer = await asyncio.to_thread(self._resolver.resolve)
        if viewer is None:
            raise CommandError("SumatraPDF not found")
        return self.build_command(request, viewer)

    def build_command(self, request: PrintRequest, viewer: str = SUMATRA_EXE) -> list[str]:
        argv = [viewer]
        if request.printer_name:
            argv += ["-print-to", request.printer_name]
        else:
            argv.append("-print-to-default")
        # one invocation, the file repeated once per copy
        argv += [request.file_path] * request.copies
        return argv


def build_print_script(request: PrintRequest, delay_ms: int = COPY_DELAY_MS) -> str:
    """PowerShell that opens the file with the Print/PrintTo verb once per copy."""
    printer = powershell_quote(request.printer_name) if request.printer_name else "$null"
    lines = [
        "$ErrorActionPreference = 'Stop';",
        f"$file = {powershell_quote(request.file_path)};",
        f"$copies = {request.copies};",
        f"$printer = {printer};",
        "for ($i = 0; $i -lt $copies; $i++) {",
        "  if ($printer) {",
        "    Start-Process -FilePath $file -Verb PrintTo -ArgumentList $printer | Out-Null;",
        "  } else {",
        "    Start-Process -FilePath $file -Verb Print | Out-Null;",
        "  }",
        f"  Start-Sleep -Milliseconds {delay_ms};",
        "}",
    ]
    return "\n".join(lines)


class PowerShellBackend(PrintBackend):
    """Last resort: let the file type's default application print it."""

    name = "PowerShell PrintTo"

    def build_command(self, request: PrintRequest) -> list[str]:
        return ["powershell", "-NoProfile", "-NonInteractive", "-Command", build_print_script(request)]
