"""Repo de la colección `note`.

- `userId`, `folderId` y `tags` se guardan como ObjectId.
- Sella `createdAt`/`updatedAt` en UTC (datetime).
- Recibe filtros ya compuestos (ver `note_filters`); no decide el alcance por dueño.
"""
from typing import Any, Dict, List, Optional

from pymongo import DESCENDING, ReturnDocument

from noteful.core.time import now_utc
from noteful.infrastructure.db.mongo import get_db
from noteful.repositories.base import storage_call

COLLECTION = "note"

# updatedAt desc con desempate por _id para un orden estable
LIST_SORT = [("updatedAt", DESCENDING), ("_id", DESCENDING)]


@storage_call
def find_notes(filtro: Dict[str, Any]) -> List[Dict[str, Any]]:
    return list(get_db()[COLLECTION].find(filtro).sort(LIST_SORT))


@storage_call
def find_note(filtro: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one(filtro)


@storage_call
def insert_note(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta nota con timestamps y devuelve el documento persistido (con `_id`)."""
    data = dict(doc)
    now = now_utc()
    data.setdefault("tags", [])
    data["createdAt"] = now
    data["updatedAt"] = now
    res = get_db()[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


@storage_call
def update_note(filtro: Dict[str, Any], fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Reemplaza campos mutables y refresca `updatedAt`; None si no hay coincidencia."""
    set_ops = {**fields, "updatedAt": now_utc()}
    return get_db()[COLLECTION].find_one_and_update(
        filtro, {"$set": set_ops}, return_document=ReturnDocument.AFTER
    )


@storage_call
def delete_note(filtro: Dict[str, Any]) -> int:
    return get_db()[COLLECTION].delete_one(filtro).deleted_count


@storage_call
def clear_folder(filtro: Dict[str, Any]) -> int:
    """Deja `folderId` en null para las notas del filtro (folder borrado)."""
    res = get_db()[COLLECTION].update_many(filtro, {"$set": {"folderId": None}})
    return res.modified_count


@storage_call
def pull_tag(filtro: Dict[str, Any], tag_oid: Any) -> int:
    """Quita un tag de las notas del filtro (tag borrado)."""
    res = get_db()[COLLECTION].update_many(filtro, {"$pull": {"tags": tag_oid}})
    return res.modified_count
