"""List the host's installed printers and detect the default one."""
from __future__ import annotations

import json
import logging
import re
from typing import Optional

from lanprint.models import Printer
from lanprint.services.commands import CommandError, CommandRunner, run_command
from lanprint.services.platforms import UNIX, WINDOWS, detect_os_family

logger = logging.getLogger(__name__)

_DEFAULT_DEST = re.compile(r"default destination:\s+(.+)$", re.IGNORECASE | re.MULTILINE)

_GET_PRINTER_PS = "Get-Printer | Select-Object Name,Shared,Default | ConvertTo-Json"


def parse_lpstat_accepting(output: str) -> list[Printer]:
    """Parse `lpstat -a`: one printer per line, name is the first token."""
    printers = []
    for line in output.splitlines():
        line = line.strip()
        if line:
            printers.append(Printer(name=line.split()[0]))
    return printers


def parse_lpstat_default(output: str) -> Optional[str]:
    """Return the destination named by `lpstat -d`, if any."""
    m = _DEFAULT_DEST.search(output)
    return m.group(1).strip() if m else None


def parse_get_printer_json(output: str) -> list[Printer]:
    """Parse ConvertTo-Json output (a single object or an array)."""
    if not output.strip():
        return []
    data = json.loads(output)
    items = data if isinstance(data, list) else [data]
    return [Printer(name=p["Name"], is_default=bool(p.get("Default"))) for p in items]


def parse_wmic_csv(output: str) -> list[Printer]:
    """Parse `wmic printer get Name,Default /format:csv`.

    The first line is a header; in each row the last field is the name and the
    one before it the default flag.
    """
    printers = []
    for line in output.strip().splitlines()[1:]:
        if not line.strip():
            continue
        parts = line.rstrip("\r").split(",")
        name = parts.pop()
        flag = parts.pop() if parts else ""
        printers.append(Printer(name=name, is_default=flag.strip().lower() == "true"))
    return printers


async def _list_unix(runner: CommandRunner) -> list[Printer]:
    try:
        printers = parse_lpstat_accepting(await runner(["lpstat", "-a"]))
    except CommandError as e:
        logger.warning("lpstat -a failed: %s", e)
        return []

    try:
        default = parse_lpstat_default(await runner(["lpstat", "-d"]))
    except CommandError as e:
        logger.info("Could not detect default printer: %s", e)
        default = None

    if default:
        for p in printers:
            if p.name == default:
                p.is_default = True
    return printers


async def _list_windows(runner: CommandRunner) -> list[Printer]:
    try:
        out = await runner(["powershell", "-NoProfile", "-Command", _GET_PRINTER_PS])
        return parse_get_printer_json(out)
    except (CommandError, ValueError, KeyError, TypeError) as e:
        logger.warning("Get-Printer failed, trying wmic: %s", e)

    try:
        out = await runner(["wmic", "printer", "get", "Name,Default", "/format:csv"])
        return parse_wmic_csv(out)
    except CommandError as e:
        logger.warning("wmic failed: %s", e)
        return []


async def list_printers(
    os_family: Optional[str] = None,
    runner: CommandRunner = run_command,
) -> list[Printer]:
    """List installed printers. Never raises; returns [] when nothing is known."""
    os_family = os_family or detect_os_family()

    if os_family == UNIX:
        printers = await _list_unix(runner)
    elif os_family == WINDOWS:
        printers = await _list_windows(runner)
    else:
        logger.info("Printer listing not supported on %s", os_family)
        printers = []

    logger.info("Found %d printer(s): %s", len(printers), [p.name for p in printers])
    return printers
