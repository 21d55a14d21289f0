from __future__ import annotations

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from lanprint import __version__
from lanprint.auth import require_access_token
from lanprint.config import Settings, get_settings
from lanprint.routers import health, printers, printing

logging.basicConfig(level=logging.INFO, format="%(name)s %(levelname)s: %(message)s")
logger = logging.getLogger(__name__)
_STATIC = Path(__file__).parent / "static"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    logger.info("=== LAN Print Server settings ===")
    logger.info("  listen:        %s:%s", settings.host, settings.port)
    logger.info("  upload_dir:    %s", settings.upload_dir)
    logger.info("  max_upload_mb: %s", settings.max_upload_mb)
    logger.info("  max_copies:    %s", settings.max_copies)
    logger.info("  sumatra_path:  %r", settings.sumatra_path)
    logger.info("  access_token:  %s", "set" if settings.access_token else "not set")

    app = FastAPI(title="LAN Print Server", version=__version__)
    app.state.settings = settings

    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        response = await call_next(request)
        return response

    gate = [Depends(require_access_token)]
    app.include_router(health.router, dependencies=gate)
    app.include_router(printers.router, dependencies=gate)
    app.include_router(printing.router, dependencies=gate)

    app.mount("/", StaticFiles(directory=_STATIC, html=True), name="static")

    return app


app = create_app()
