"""Sample endpoints that exercise the access log fields."""
from __future__ import annotations

import asyncio

from fastapi import APIRouter, Response, status

router = APIRouter(tags=["demo"])

USAGE_MESSAGE = b"""
supported requests:
\t/render/?target=
\t/metrics/find/?query=
\t/info/?target=
"""

DELAY_SECONDS = 0.05


@router.get("/usage")
async def usage() -> Response:
    return Response(content=USAGE_MESSAGE, media_type="text/plain")


@router.get("/denied")
async def denied() -> Response:
    return Response(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/delayed")
async def delayed() -> Response:
    await asyncio.sleep(DELAY_SECONDS)
    return Response()
