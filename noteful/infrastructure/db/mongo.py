"""Cliente MongoDB (pymongo) compartido por los repositorios.

`init_mongo()` se llama una sola vez en el startup; si Mongo no responde la app
arranca igual y `get_db()` lanza MongoNotReady hasta que haya conexión.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import certifi
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from noteful.core.config import settings

_log = logging.getLogger("noteful.mongo")

class MongoNotReady(RuntimeError):
    pass


_client: Optional[MongoClient] = None
_db: Optional[Database] = None


def _client_kwargs(uri: str) -> dict[str, Any]:
    kwargs: dict[str, Any] = dict(serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms)
    if uri.startswith("mongodb+srv://"):
        # SRV ya implica TLS; proveemos CA bundle para robustez
        kwargs["tlsCAFile"] = certifi.where()
    elif settings.mongo_tls:
        kwargs["tls"] = True
        kwargs["tlsCAFile"] = certifi.where()
        kwargs["tlsAllowInvalidCertificates"] = settings.mongo_tls_insecure
        kwargs["tlsAllowInvalidHostnames"] = settings.mongo_tls_allow_invalid_hostnames
    return kwargs


def init_mongo() -> None:
    """Inicializa el cliente y valida conexión (ping)."""
    global _client, _db
    uri = settings.mongo_uri
    try:
        client = MongoClient(uri, **_client_kwargs(uri))
        client.admin.command("ping")
    except ServerSelectionTimeoutError as e:
        # No tumbar la app: deja _db en None y loggea
        _log.warning("Mongo no accesible (timeout): %s", e)
        _client, _db = None, None
        return
    except PyMongoError as e:
        _log.warning("Error de conexión a Mongo: %s", e)
        _client, _db = None, None
        return
    _client = client
    _db = client[settings.mongo_db]
    _log.info("Mongo conectado (db=%s)", settings.mongo_db)


def use_database(db: Optional[Database]) -> None:
    """Fija la base activa (p. ej. una base en memoria en tests)."""
    global _db
    _db = db


def close_mongo() -> None:
    global _client, _db
    if _client is not None:
        _client.close()
    _client, _db = None, None


def get_db() -> Database:
    """
    Devuelve la referencia a la base de datos.
    Úsalo en repositorios, no en routers.
    """
    if _db is None:
        raise MongoNotReady("Mongo no inicializado. Intenta más tarde.")
    return _db


def db_ready() -> bool:
    return _db is not None
