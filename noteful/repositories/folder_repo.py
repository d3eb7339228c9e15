"""Repo de la colección `folder` (nombre único por usuario)."""
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument

from noteful.core.time import now_utc
from noteful.infrastructure.db.mongo import get_db
from noteful.repositories.base import storage_call
from noteful.repositories.note_filters import combine, owner_clause

COLLECTION = "folder"


@storage_call
def find_folders(filtro: Dict[str, Any]) -> List[Dict[str, Any]]:
    return list(get_db()[COLLECTION].find(filtro).sort("name", ASCENDING))


@storage_call
def find_folder(filtro: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one(filtro)


@storage_call
def insert_folder(doc: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    now = now_utc()
    data["createdAt"] = now
    data["updatedAt"] = now
    res = get_db()[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


@storage_call
def update_folder(filtro: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one_and_update(
        filtro,
        {"$set": {"name": name, "updatedAt": now_utc()}},
        return_document=ReturnDocument.AFTER,
    )


@storage_call
def delete_folder(filtro: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one_and_delete(filtro)


@storage_call
def is_owned(user_id: str, folder_oid: ObjectId) -> bool:
    filtro = combine((owner_clause(user_id), {"_id": folder_oid}))
    return get_db()[COLLECTION].find_one(filtro, {"_id": 1}) is not None
