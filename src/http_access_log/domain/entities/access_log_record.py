from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from http_access_log.domain.entities.response_stats import ResponseStats


@dataclass(frozen=True, slots=True)
class AccessLogRecord:
    remote_addr: str
    username: str | None
    timestamp: datetime
    method: str
    url: str
    proto: str
    stats: ResponseStats
    request_time: timedelta
    upstream_time: timedelta
    referer: str | None = None
    user_agent: str | None = None
    compression_ratio: float = 0.0
