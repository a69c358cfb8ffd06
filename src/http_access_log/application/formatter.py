"""Apache combined-log-format rendering of an access log record.

Line layout::

    <client-ip> - <user> [<timestamp>] "<method> <url> <proto>" <status> <bytes>
    <reqSecs>/<upstreamSecs> "<referer>" "<user-agent>" <ratio> -

Every field has a fallback, so formatting a record never fails.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from http_access_log.domain.entities.access_log_record import AccessLogRecord

EMPTY_FIELD = "-"

# strftime("%b") follows the process locale; log lines must not.
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def client_ip(remote_addr: str) -> str:
    """Strip the port from ``host:port`` or ``[ipv6]:port``."""
    if remote_addr.startswith("["):
        host, sep, _ = remote_addr[1:].partition("]")
        return host if sep else remote_addr
    host = remote_addr.split(":", 1)[0]
    return host or EMPTY_FIELD


def format_timestamp(dt: datetime) -> str:
    """Render ``DD/Mon/YYYY:HH:MM:SS +HHMM`` in the timestamp's own zone."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return "%02d/%s/%04d:%02d:%02d:%02d %s" % (
        dt.day,
        _MONTHS[dt.month - 1],
        dt.year,
        dt.hour,
        dt.minute,
        dt.second,
        _format_offset(dt.utcoffset() or timedelta(0)),
    )


def _format_offset(offset: timedelta) -> str:
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{minutes:02d}"


def format_seconds(duration: timedelta) -> str:
    return f"{duration.total_seconds():.3f}"


def format_ratio(ratio: float) -> str:
    if ratio > 0:
        return f"{ratio:.2f}"
    return EMPTY_FIELD


def format_access_log(record: AccessLogRecord) -> str:
    return '%s - %s [%s] "%s %s %s" %d %d %s/%s "%s" "%s" %s -' % (
        client_ip(record.remote_addr),
        record.username or EMPTY_FIELD,
        format_timestamp(record.timestamp),
        record.method,
        record.url,
        record.proto,
        record.stats.status_code,
        record.stats.body_bytes,
        format_seconds(record.request_time),
        format_seconds(record.upstream_time),
        record.referer or EMPTY_FIELD,
        record.user_agent or EMPTY_FIELD,
        format_ratio(record.compression_ratio),
    )
