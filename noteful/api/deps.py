"""
Dependencias reutilizables para routers (FastAPI Depends).

- Autenticación: extrae y valida el Access Token y devuelve la identidad.
- Mantener esta capa delgada: sin lógica de negocio.
"""
import logging
from typing import Optional

import jwt
from fastapi import Header, HTTPException
from starlette.status import HTTP_401_UNAUTHORIZED

from noteful.core.identity import AuthenticatedUser
from noteful.services.token_service import identity_from_token

_log = logging.getLogger("noteful.auth")


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def bearer_token(authorization: Optional[str] = Header(default=None)) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise _unauthorized()
    return authorization.split(" ", 1)[1].strip()


def get_current_user(authorization: Optional[str] = Header(default=None)) -> AuthenticatedUser:
    token = bearer_token(authorization)
    try:
        return identity_from_token(token)
    except jwt.PyJWTError as e:
        _log.info("Token rechazado: %s", e)
        raise _unauthorized()
