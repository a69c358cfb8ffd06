"""Shared test fixtures."""
from __future__ import annotations

import base64
import io
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

BASE_TIME = datetime(2009, 11, 10, 23, 0, 0, tzinfo=timezone.utc)


@dataclass
class FakeClock:
    """Clock frozen at ``current`` until a test advances it."""

    current: datetime = BASE_TIME
    reads: int = 0

    def now(self) -> datetime:
        self.reads += 1
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current += delta


class FakeMonotonic:
    """Monotonic source replaying fixed readings."""

    def __init__(self, *readings: float) -> None:
        self._readings = list(readings)

    def __call__(self) -> float:
        return self._readings.pop(0)


@dataclass
class RecordingSend:
    messages: list[dict[str, Any]] = field(default_factory=list)
    label: str = "recording"

    async def __call__(self, message: dict[str, Any]) -> None:
        self.messages.append(message)


async def empty_receive() -> dict[str, Any]:
    return {"type": "http.request", "body": b"", "more_body": False}


def basic_auth_header(username: str, password: str = "") -> tuple[bytes, bytes]:
    token = base64.b64encode(f"{username}:{password}".encode()).decode()
    return b"authorization", f"Basic {token}".encode()


def make_scope(
    *,
    method: str = "GET",
    path: str = "/",
    query_string: bytes = b"",
    http_version: str = "1.1",
    client: tuple[str, int] | None = ("127.0.0.1", 1234),
    headers: list[tuple[bytes, bytes]] | None = None,
) -> dict[str, Any]:
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": http_version,
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "query_string": query_string,
        "root_path": "",
        "headers": headers or [],
        "client": client,
        "server": ("127.0.0.1", 8000),
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def send() -> RecordingSend:
    return RecordingSend()


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()
