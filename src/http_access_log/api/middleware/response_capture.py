from __future__ import annotations

import os
from typing import Any

from starlette.types import Message, Send

from http_access_log.domain.entities.response_stats import ResponseStats


class ResponseCapture:
    """Stand-in for an ASGI ``send`` that records status and body size.

    Every message is forwarded to the wrapped ``send`` as is, in order and
    without buffering; the result (or exception) of the real send is passed
    straight back to the caller.
    """

    def __init__(self, send: Send, stats: ResponseStats) -> None:
        self._send = send
        self.stats = stats
        self.started = False

    async def __call__(self, message: Message) -> None:
        message_type = message["type"]
        if message_type == "http.response.start":
            self.stats.status_code = message["status"]
            self.started = True
        elif message_type == "http.response.body":
            self.stats.body_bytes += len(message.get("body", b""))
        elif message_type == "http.response.pathsend":
            self.stats.body_bytes += _file_size(message["path"])
        return await self._send(message)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._send, name)


def _file_size(path: str) -> int:
    try:
        return os.stat(path).st_size
    except OSError:
        # The server reports the missing file when it tries to send it.
        return 0
