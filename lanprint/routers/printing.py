from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import JSONResponse

from lanprint.models import PrintRequest, normalize_copies
from lanprint.services.dispatcher import get_dispatcher
from lanprint.services.uploads import UploadTooLarge, save_upload, schedule_removal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["print"])


@router.post("/print")
async def print_upload(
    request: Request,
    file: Optional[UploadFile] = File(None),
    printer: Optional[str] = Form(None),
    copies: Optional[str] = Form(None),
):
    settings = request.app.state.settings

    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    copies = normalize_copies(copies)
    if copies > settings.max_copies:
        raise HTTPException(status_code=400, detail=f"copies must be at most {settings.max_copies}")

    try:
        path = await save_upload(file, settings.upload_dir, settings.max_upload_bytes)
    except UploadTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e))

    try:
        job = PrintRequest(file_path=str(path.resolve()), printer_name=printer, copies=copies)
        dispatcher = get_dispatcher(sumatra_path=settings.sumatra_path)
        outcome = await dispatcher.print_file(job)
    finally:
        schedule_removal(path, settings.cleanup_delay_s)

    if not outcome.success:
        return JSONResponse(status_code=500, content={"ok": False, "error": outcome.error})
    return {"ok": True, "method": outcome.method, "message": outcome.output}
