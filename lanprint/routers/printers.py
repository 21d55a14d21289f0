from __future__ import annotations

from fastapi import APIRouter

from lanprint.services.printers import list_printers

router = APIRouter(prefix="/api/printers", tags=["printers"])


@router.get("")
async def get_printers():
    printers = await list_printers()
    return {"ok": True, "printers": [p.model_dump(by_alias=True) for p in printers]}
