from __future__ import annotations


class AccessLogError(Exception):
    """Base access log error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class InvalidSinkError(AccessLogError):
    pass
