from __future__ import annotations

import base64
from typing import Mapping

SCHEME = "basic"


def basic_auth_username(headers: Mapping[str, str]) -> str | None:
    """Return the username from a ``Basic`` Authorization header.

    Missing, malformed, non-ASCII or non-Basic credentials yield None. The
    password is never decoded past the first colon.
    """
    authorization = headers.get("authorization")
    if not authorization:
        return None

    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() != SCHEME:
        return None

    try:
        decoded = base64.b64decode(credentials.strip(), validate=True).decode("utf-8")
    except ValueError:
        return None

    username, sep, _ = decoded.partition(":")
    if not sep:
        return None
    return username or None
