"""
Run the catalog web front end under uvicorn.
"""

from __future__ import annotations

import logging

import uvicorn

from catalog.config import get_settings

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
    )
    logger.info("Server running at http://localhost:%d", settings.port)
    uvicorn.run("catalog.app:app", host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
