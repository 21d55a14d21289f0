"""Optional shared-token gate for the API."""
from __future__ import annotations

import secrets
from typing import Optional

from fastapi import Header, HTTPException, Query, Request


async def require_access_token(
    request: Request,
    x_access_token: Optional[str] = Header(None),
    token: Optional[str] = Query(None),
) -> None:
    expected = request.app.state.settings.access_token
    if not expected:
        return

    supplied = x_access_token or token
    if supplied is None and request.headers.get("content-type", "").startswith(
        ("multipart/form-data", "application/x-www-form-urlencoded")
    ):
        form = await request.form()
        value = form.get("token")
        supplied = value if isinstance(value, str) else None

    if supplied is None or not secrets.compare_digest(supplied.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Unauthorized: missing or invalid token")
