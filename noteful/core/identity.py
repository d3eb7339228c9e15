"""Identidad del usuario autenticado (derivada solo de un token verificado)."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthenticatedUser:
    id: str
    username: Optional[str] = None
