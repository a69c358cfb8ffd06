"""Combined-log-format access logging for any ASGI application."""
from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import IO

from starlette.requests import Request
from starlette.types import ASGIApp, Receive, Scope, Send

from http_access_log.api.middleware.response_capture import ResponseCapture
from http_access_log.application.formatter import format_access_log
from http_access_log.application.ports.clock import Clock, SystemClock
from http_access_log.domain.entities.access_log_record import AccessLogRecord
from http_access_log.domain.entities.response_stats import ResponseStats
from http_access_log.infrastructure.auth.basic import basic_auth_username
from http_access_log.infrastructure.sink.stream import resolve_sink

logger = logging.getLogger(__name__)


class AccessLogMiddleware:
    """Write one access log line per HTTP request once the app has finished.

    ``output`` is a ``logging.Logger``, a writable text stream, or None for the
    process default access logger. ``clock`` defaults to the wall clock.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        output: logging.Logger | IO[str] | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.app = app
        self.access_logger = resolve_sink(output)
        self.clock = clock if clock is not None else SystemClock()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = self.clock.now()
        stats = ResponseStats()
        capture = ResponseCapture(send, stats)
        try:
            await self.app(scope, receive, capture)
        except BaseException:
            # Cancellation included: a response that never started was never sent.
            if not capture.started:
                stats.status_code = 500
            logger.debug("Request to %s ended without completing", scope.get("path"))
            raise
        finally:
            request_time = self.clock.now() - start
            record = build_record(scope, start, stats, request_time)
            self.access_logger.info(format_access_log(record))


def build_record(
    scope: Scope,
    timestamp: datetime,
    stats: ResponseStats,
    request_time: timedelta,
) -> AccessLogRecord:
    """Assemble the record for one finished request.

    No upstream call is timed separately and compression is not measured, so
    the upstream time equals the request time and the ratio stays 0.
    """
    request = Request(scope)
    headers = request.headers
    return AccessLogRecord(
        remote_addr=_remote_addr(scope),
        username=basic_auth_username(headers),
        timestamp=timestamp,
        method=request.method,
        url=_request_target(scope),
        proto=_protocol(scope),
        stats=stats,
        request_time=request_time,
        upstream_time=request_time,
        referer=headers.get("referer"),
        user_agent=headers.get("user-agent"),
        compression_ratio=0.0,
    )


def _remote_addr(scope: Scope) -> str:
    client = scope.get("client")
    if not client:
        return ""
    host, port = client
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _request_target(scope: Scope) -> str:
    raw_path = scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else scope.get("path", "")
    query = scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def _protocol(scope: Scope) -> str:
    # ASGI reports HTTP/2 and HTTP/3 as "2" and "3"; the log shows "HTTP/2.0".
    version = scope.get("http_version", "1.1")
    if "." not in version:
        version = f"{version}.0"
    return f"HTTP/{version}"
