"""Identifier helpers for producing log-safe user tokens."""

from __future__ import annotations

import base64
import hashlib
import hmac
from functools import lru_cache

from banana_stand.core.config import settings


def _encode_digest(digest: bytes) -> str:
    """URL-safe base64 encoding without padding."""
    token = base64.urlsafe_b64encode(digest).decode("ascii")
    return token.rstrip("=")


def _pseudonymize(value: str, secret: str, length: int = 16) -> str:
    digest = hmac.new(secret.encode("utf-8"), value.encode("utf-8"), hashlib.sha256).digest()
    return _encode_digest(digest)[:length]


@lru_cache(maxsize=4096)
def _pseudonym_cache(user_id: str, secret: str) -> str:
    return _pseudonymize(user_id, secret)


def get_log_safe_user_id(user_id: str, *, secret: str | None = None) -> str:
    """Return a deterministic, non-reversible identifier suitable for logs.

    Platform user ids are long opaque strings tied to an account; they never
    appear in logs verbatim.
    """
    resolved_secret = secret or settings.LOG_PSEUDONYM_SECRET
    if not resolved_secret:
        raise RuntimeError("LOG_PSEUDONYM_SECRET must be configured.")
    return _pseudonym_cache(user_id, resolved_secret)


def clear_log_safe_user_cache() -> None:
    """Clear cached pseudonyms (useful for tests or secret rotation)."""
    _pseudonym_cache.cache_clear()


__all__ = ["get_log_safe_user_id", "clear_log_safe_user_cache"]
