from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ResponseStats:
    """What the response capture observed for a single request."""

    body_bytes: int = 0
    status_code: int = 200
