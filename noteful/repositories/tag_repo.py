"""Repo de la colección `tag` (nombre único por usuario)."""
from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument

from noteful.core.time import now_utc
from noteful.infrastructure.db.mongo import get_db
from noteful.repositories.base import storage_call
from noteful.repositories.note_filters import combine, owner_clause

COLLECTION = "tag"


@storage_call
def find_tags(filtro: Dict[str, Any]) -> List[Dict[str, Any]]:
    return list(get_db()[COLLECTION].find(filtro).sort("name", ASCENDING))


@storage_call
def find_tag(filtro: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one(filtro)


@storage_call
def insert_tag(doc: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    now = now_utc()
    data["createdAt"] = now
    data["updatedAt"] = now
    res = get_db()[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


@storage_call
def update_tag(filtro: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one_and_update(
        filtro,
        {"$set": {"name": name, "updatedAt": now_utc()}},
        return_document=ReturnDocument.AFTER,
    )


@storage_call
def delete_tag(filtro: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one_and_delete(filtro)


@storage_call
def count_owned(user_id: str, tag_oids: Sequence[ObjectId]) -> int:
    """Cuántos de `tag_oids` (distintos) pertenecen al usuario."""
    filtro = combine((owner_clause(user_id), {"_id": {"$in": list(tag_oids)}}))
    return get_db()[COLLECTION].count_documents(filtro)
