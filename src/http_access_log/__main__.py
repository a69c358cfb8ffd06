"""Entrypoint: python -m http_access_log"""
from __future__ import annotations

import uvicorn

from http_access_log.config import settings


def main() -> None:
    uvicorn.run(
        "http_access_log.app:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        access_log=False,
    )


if __name__ == "__main__":
    main()
