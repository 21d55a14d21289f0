"""Store uploaded files on disk and remove them after printing."""
from __future__ import annotations

import asyncio
import logging
import re
import time
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^\w.\-()+ ]+")
_CHUNK = 1024 * 1024


class UploadTooLarge(ValueError):
    pass


def safe_filename(name: str) -> str:
    """Replace anything outside word chars, dot, dash, parens, plus and space."""
    return _UNSAFE_CHARS.sub("_", name) or "upload"


def upload_path(upload_dir: Path, original_name: str, attempt: int = 0) -> Path:
    ts = int(time.time() * 1000)
    stamp = f"{ts}-{attempt}" if attempt else str(ts)
    return upload_dir / f"{stamp}__{safe_filename(Path(original_name).name)}"


def _create_exclusive(upload_dir: Path, original_name: str):
    """Open a fresh upload file; never reuses a path another job still holds."""
    attempt = 0
    while True:
        path = upload_path(upload_dir, original_name, attempt)
        try:
            return path, path.open("xb")
        except FileExistsError:
            attempt += 1


async def save_upload(file: UploadFile, upload_dir: Path, max_bytes: int) -> Path:
    """Stream *file* into *upload_dir*; raises UploadTooLarge past *max_bytes*."""
    upload_dir.mkdir(parents=True, exist_ok=True)
    path, handle = _create_exclusive(upload_dir, file.filename or "upload")

    size = 0
    with handle as f:
        while True:
            chunk = await file.read(_CHUNK)
            if not chunk:
                break
            size += len(chunk)
            if size > max_bytes:
                break
            f.write(chunk)

    if size > max_bytes:
        path.unlink(missing_ok=True)
        raise UploadTooLarge(f"File exceeds {max_bytes} bytes")

    logger.info("Saved upload %s (%d bytes)", path.name, size)
    return path


def remove_upload(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
        logger.info("Removed upload %s", path.name)
    except OSError:
        logger.exception("Failed to remove upload %s", path)


def schedule_removal(path: Path, delay_s: float) -> asyncio.TimerHandle:
    """Delete *path* after *delay_s* seconds without holding up the caller."""
    return asyncio.get_running_loop().call_later(delay_s, remove_upload, path)
