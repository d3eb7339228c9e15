"""Utilidades comunes de los repositorios."""
import functools
import logging
from typing import Any, Callable, TypeVar

from pymongo.errors import DuplicateKeyError, PyMongoError

from noteful.infrastructure.db.mongo import MongoNotReady
from noteful.services.errors import StorageFailure

_log = logging.getLogger("noteful.mongo")

F = TypeVar("F", bound=Callable[..., Any])


def storage_call(fn: F) -> F:
    """Convierte errores del driver en StorageFailure.

    DuplicateKeyError se propaga tal cual: los servicios la traducen a un
    error de validación (nombre repetido).
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except DuplicateKeyError:
            raise
        except (PyMongoError, MongoNotReady) as e:
            _log.warning("%s falló: %s", fn.__name__, e)
            raise StorageFailure() from e

    return wrapper  # type: ignore[return-value]
