"""Run the print server: `python -m lanprint` or `lanprint`."""
from __future__ import annotations

import logging

import uvicorn

from lanprint.main import app

logger = logging.getLogger("lanprint")


def main() -> None:
    settings = app.state.settings

    logger.info("LAN Print Server running on http://%s:%s", settings.host, settings.port)
    logger.info("Open from other devices via http://<your-lan-ip>:%s", settings.port)
    if settings.access_token:
        logger.info("Access token is enabled. Clients must include the token.")
    else:
        logger.warning("No access token set. Anyone on your LAN can submit prints.")

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
