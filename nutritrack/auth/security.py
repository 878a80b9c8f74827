# -*- coding: utf-8 -*-
"""Auth — roster session tokens.

A session token is an HS256 JWT whose only identity claim is the roster user
id. A token stays valid only while that id is still on the roster.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request

from ..config import settings
from ..directory import UserDirectory

TOKEN_COOKIE_NAME = "nutritrack_token"

_SECONDS_PER_DAY = 24 * 60 * 60


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _unb64url(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


_HEADER = _b64url(b'{"alg":"HS256","typ":"JWT"}')


def _signature(signing_input: str) -> bytes:
    return hmac.new(settings.jwt_secret.encode("utf-8"), signing_input.encode("ascii"), hashlib.sha256).digest()


def _now() -> int:
    return int(datetime.now(timezone.utc).timestamp())


def issue_session_token(user_id: str) -> str:
    issued = _now()
    claims = {"sub": user_id, "iat": issued, "exp": issued + int(settings.token_ttl_days) * _SECONDS_PER_DAY}
    body = _b64url(json.dumps(claims, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{_HEADER}.{body}"
    return f"{signing_input}.{_b64url(_signature(signing_input))}"


def read_session_token(token: str) -> str:
    """Return the roster user id carried by a signed, unexpired token."""
    try:
        signing_input, sig = token.rsplit(".", 1)
        _, body = signing_input.split(".")
        signed = hmac.compare_digest(_signature(signing_input), _unb64url(sig))
        claims = json.loads(_unb64url(body).decode("utf-8"))
    except (ValueError, UnicodeError) as exc:
        raise HTTPException(status_code=401, detail="Invalid token") from exc
    if not signed or not isinstance(claims, dict):
        raise HTTPException(status_code=401, detail="Invalid token")

    expires = claims.get("exp")
    if not isinstance(expires, int) or expires < _now():
        raise HTTPException(status_code=401, detail="Token expired")
    user_id = str(claims.get("sub") or "").strip()
    if not user_id:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user_id


def session_token_from_request(request: Request) -> Optional[str]:
    auth = request.headers.get("authorization") or ""
    if auth.lower().startswith("bearer "):
        return auth.split(" ", 1)[1].strip() or None
    return request.cookies.get(TOKEN_COOKIE_NAME) or None


def current_user(request: Request) -> Dict[str, Any]:
    """FastAPI dependency: the logged-in roster user, cached on the request."""
    user = getattr(request.state, "user", None)
    if user:
        return user

    token = session_token_from_request(request)
    if not token:
        raise HTTPException(status_code=401, detail="Not authenticated")
    user_id = read_session_token(token)
    if user_id not in UserDirectory().list_user_ids():
        raise HTTPException(status_code=401, detail="User is no longer on the roster")

    user = {"id": user_id}
    request.state.user = user
    return user
