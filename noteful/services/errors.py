"""
Errores tipados de la capa de servicios.

Cada error lleva su `status_code` y el `message` expuesto al cliente; los
handlers de `noteful.core.exceptions` los traducen a respuestas HTTP.
"""
from typing import Optional


class ServiceError(Exception):
    status_code: int = 400

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidIdentifier(ServiceError):
    """Identificador con formato inválido donde se requiere uno."""

    def __init__(self, field: str = "id") -> None:
        super().__init__(f"The {field} is not valid")
        self.field = field


class MissingField(ServiceError):
    """Campo requerido ausente o vacío en el body."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing {field} in request body")
        self.field = field


class InvalidField(ServiceError):
    """Campo presente pero con tipo/valor no aceptado."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class NotFound(ServiceError):
    status_code = 404

    def __init__(self, message: str = "Not Found") -> None:
        super().__init__(message)


class InvalidCredentials(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Incorrect username or password") -> None:
        super().__init__(message)


class StorageFailure(ServiceError):
    """El almacén no respondió o devolvió error; no se reintenta."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
