"""
Bootstrap de la base Mongo: índices mínimos por colección.
Se ejecuta al inicio de la app; una falla de índice deja un warning y no tumba el arranque.
"""
from __future__ import annotations

from typing import Any, Dict, List
import logging

from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError

from noteful.infrastructure.db.mongo import get_db
from noteful.repositories.folder_repo import COLLECTION as FOLDER_COLL
from noteful.repositories.note_repo import COLLECTION as NOTE_COLL
from noteful.repositories.tag_repo import COLLECTION as TAG_COLL
from noteful.repositories.user_repo import COLLECTION as USER_COLL

_log = logging.getLogger("noteful.mongo.bootstrap")

INDEXES: Dict[str, List[Dict[str, Any]]] = {
    NOTE_COLL: [
        {"keys": [("userId", ASCENDING), ("updatedAt", DESCENDING)], "name": "user_updated"},
        {"keys": [("userId", ASCENDING), ("folderId", ASCENDING)], "name": "user_folder"},
        {"keys": [("userId", ASCENDING), ("tags", ASCENDING)], "name": "user_tags"},
    ],
    FOLDER_COLL: [
        {"keys": [("userId", ASCENDING), ("name", ASCENDING)], "name": "user_name_unique", "unique": True},
    ],
    TAG_COLL: [
        {"keys": [("userId", ASCENDING), ("name", ASCENDING)], "name": "user_name_unique", "unique": True},
    ],
    USER_COLL: [
        {"keys": [("username", ASCENDING)], "name": "username_unique", "unique": True},
    ],
}


def _ensure_indexes(name: str, indexes: List[Dict[str, Any]]) -> int:
    coll = get_db()[name]
    created = 0
    for ix in indexes:
        opts = dict(ix)
        keys = opts.pop("keys")
        try:
            coll.create_index(keys, **opts)
            created += 1
        except PyMongoError as e:
            # Ignora fallas de índice (e.g., datos no únicos previos)
            _log.warning("No se pudo crear índice en '%s' (%s): %s", name, keys, e)
    return created


def ensure_collections() -> int:
    """Garantiza índices mínimos; devuelve cuántos se aplicaron."""
    total = 0
    for name, indexes in INDEXES.items():
        total += _ensure_indexes(name, indexes)
    _log.info("Índices asegurados: %s", total)
    return total
