"""Resolution of the access log output sink.

Lines always go through a ``logging.Logger``: its handlers hold a lock around
each emit, so concurrent requests never interleave partial lines.
"""
from __future__ import annotations

import logging
import sys
from typing import IO

from http_access_log.application.exceptions import InvalidSinkError

DEFAULT_LOGGER_NAME = "http_access_log.access"
LINE_FORMAT = "%(message)s"


def _plain_handler(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(LINE_FORMAT))
    return handler


def stream_logger(stream: IO[str], name: str | None = None) -> logging.Logger:
    """Build a dedicated, undecorated logger writing to ``stream``."""
    logger = logging.Logger(name or f"{DEFAULT_LOGGER_NAME}.{id(stream):x}")
    logger.setLevel(logging.INFO)
    logger.propagate = False
    logger.addHandler(_plain_handler(logging.StreamHandler(stream)))
    return logger


def file_logger(path: str, name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Named logger appending to ``path``; configured once per process."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_plain_handler(logging.FileHandler(path, mode="a", encoding="utf-8")))
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def default_logger(name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """Process-wide access logger writing bare lines to stderr.

    Handlers already attached (e.g. by the hosting application's logging
    config) are left alone.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_plain_handler(logging.StreamHandler(sys.stderr)))
        logger.setLevel(logging.INFO)
        logger.propagate = False
    return logger


def resolve_sink(output: logging.Logger | IO[str] | None) -> logging.Logger:
    if output is None:
        return default_logger()
    if isinstance(output, logging.Logger):
        return output
    if callable(getattr(output, "write", None)):
        return stream_logger(output)
    raise InvalidSinkError(
        f"access log output must be a logging.Logger or a writable stream, got {type(output).__name__}"
    )
