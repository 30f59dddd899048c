from __future__ import annotations

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import HTTPException, status

from salestrack.config import get_settings


def generate_salt() -> str:
    return secrets.token_hex(16)


def hash_password(password: str, salt: str, rounds: Optional[int] = None) -> str:
    if rounds is None:
        rounds = get_settings().PASSWORD_PBKDF2_ROUNDS
    digest = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        salt.encode("utf-8"),
        rounds,
    )
    return digest.hex()


def verify_password(password: str, salt: str, expected_hash: str, rounds: Optional[int] = None) -> bool:
    computed = hash_password(password, salt, rounds)
    return hmac.compare_digest(computed, expected_hash)


def _require_secret() -> str:
    settings = get_settings()
    if not settings.JWT_SECRET:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="JWT auth is not configured",
        )
    return settings.JWT_SECRET


def create_access_token(username: str, *, now: Optional[datetime] = None) -> str:
    settings = get_settings()
    secret = _require_secret()
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    if settings.JWT_ISSUER:
        claims["iss"] = settings.JWT_ISSUER
    if settings.JWT_AUDIENCE:
        claims["aud"] = settings.JWT_AUDIENCE
    return jwt.encode(claims, secret, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    settings = get_settings()
    secret = _require_secret()
    options = {"verify_aud": bool(settings.JWT_AUDIENCE), "require": ["exp", "sub"]}
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
            options=options,
        )
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid JWT",
        ) from exc


def get_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) == 2 and parts[0].lower() == "bearer":
        return parts[1]
    return None


def authenticate_request(authorization: Optional[str], cookie_token: Optional[str]) -> str:
    """Resolve the caller's username from a bearer header or the JWT cookie."""
    token = get_bearer_token(authorization) or (cookie_token or "").strip() or None
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_token(token)
    username = str(payload.get("sub") or "").strip()
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid JWT",
        )
    return username
