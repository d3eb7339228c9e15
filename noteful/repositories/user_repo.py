"""Persistencia de usuarios (username único, password como hash argon2)."""
from typing import Any, Dict, Optional

from noteful.core.ids import is_valid_id, to_object_id
from noteful.core.time import now_utc
from noteful.infrastructure.db.mongo import get_db
from noteful.repositories.base import storage_call

COLLECTION = "user"


@storage_call
def insert_user(doc: Dict[str, Any]) -> Dict[str, Any]:
    data = dict(doc)
    now = now_utc()
    data["createdAt"] = now
    data["updatedAt"] = now
    res = get_db()[COLLECTION].insert_one(data)
    data["_id"] = res.inserted_id
    return data


@storage_call
def find_user_by_username(username: str) -> Optional[Dict[str, Any]]:
    return get_db()[COLLECTION].find_one({"username": username})


@storage_call
def get_user_by_id(user_id: str) -> Optional[Dict[str, Any]]:
    """Obtiene usuario por id (str)."""
    if not is_valid_id(user_id):
        return None
    return get_db()[COLLECTION].find_one({"_id": to_object_id(user_id)})
