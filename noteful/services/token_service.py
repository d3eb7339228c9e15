"""
Creación y verificación de JWTs de acceso (PyJWT, HS256 por defecto).
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict
from uuid import uuid4

import jwt

from noteful.core.config import settings
from noteful.core.identity import AuthenticatedUser
from noteful.core.ids import is_valid_id


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _secret() -> str:
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET no configurado")
    return settings.jwt_secret


def create_access_token(*, user_id: str, username: str | None = None) -> str:
    """
    Genera un JWT válido por ACCESS_TOKEN_EXPIRE_MINUTES.
    Claims: sub(user_id), username, iat, exp, jti.
    """
    now = _now_utc()
    exp = now + timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "username": username,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
        "jti": str(uuid4()),
    }
    return jwt.encode(payload, _secret(), algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> Dict[str, Any]:
    """
    Decodifica y valida firma/expiración. Devuelve payload.
    Lanza jwt.PyJWTError si el token no es válido.
    """
    return jwt.decode(
        token,
        key=_secret(),
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "exp"]},
    )


def identity_from_token(token: str) -> AuthenticatedUser:
    payload = verify_access_token(token)
    sub = payload.get("sub")
    if not is_valid_id(sub):
        raise jwt.InvalidTokenError("sub is not a valid id")
    return AuthenticatedUser(id=sub, username=payload.get("username"))
