"""Security helpers (admin API key derivation and verification)."""

from __future__ import annotations

import hashlib
import secrets
from datetime import datetime, timezone

from argon2 import PasswordHasher, exceptions as argon_exc
from fastapi import HTTPException, Request

from .config import get_settings

API_KEY_HEADER = "X-API-Key"
_ph = PasswordHasher()
_MONTHLY_SALT = "wordzee_admin_"


def hash_api_key(api_key: str) -> str:
    """Argon2 hash suitable for WORDZEE_API_KEY_HASH."""
    return _ph.hash(api_key)


def monthly_api_key(secret: str, now: datetime | None = None) -> str:
    """Admin key rotating every calendar month (UTC): fixed secret + sha256 of the month."""
    moment = now or datetime.now(timezone.utc)
    digest = hashlib.sha256(f"{_MONTHLY_SALT}{moment:%Y-%m}".encode()).hexdigest()
    return f"{secret}{digest}"


def verify_api_key(supplied: str | None, *, secret: str = "", stored_hash: str = "", now: datetime | None = None) -> bool:
    candidate = (supplied or "").strip()
    if not candidate:
        return False
    if secret and secrets.compare_digest(candidate, monthly_api_key(secret, now)):
        return True
    if stored_hash:
        try:
            return _ph.verify(stored_hash, candidate)
        except (argon_exc.VerifyMismatchError, argon_exc.VerificationError, argon_exc.InvalidHashError):
            return False
    return False


def require_api_key(request: Request) -> None:
    """FastAPI dependency guarding the administrative endpoints."""
    settings = get_settings()
    supplied = request.headers.get(API_KEY_HEADER)
    if not verify_api_key(supplied, secret=settings.api_key_secret, stored_hash=settings.api_key_hash):
        raise HTTPException(401, "Unauthorized")
