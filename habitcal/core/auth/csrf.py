"""Session-bound CSRF tokens for the tracker's mutating endpoints."""

from __future__ import annotations

import secrets

from flask import session

CSRF_SESSION_KEY = "_habitcal_csrf"
CSRF_HEADER = "X-CSRF-Token"


def issue_csrf_token() -> str:
    """The session's token, minted on first use."""
    token = session.get(CSRF_SESSION_KEY)
    if not token:
        token = secrets.token_urlsafe(32)
        session[CSRF_SESSION_KEY] = token
    return token


def check_csrf_token(token: str) -> bool:
    expected = session.get(CSRF_SESSION_KEY)
    if not token or not expected:
        return False
    return secrets.compare_digest(token, expected)
