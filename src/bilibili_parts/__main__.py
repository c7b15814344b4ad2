"""Run the service with uvicorn.

Usage:
    python -m bilibili_parts

PORT selects the listening port (default 2323); DEBUG=true raises the
log level and logs raw upstream bodies.
"""

from __future__ import annotations

import logging

import uvicorn

from bilibili_parts.config import Settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Bilibili parts service starting, listening on port {settings.port}")

    uvicorn.run("bilibili_parts.api.app:app", host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
