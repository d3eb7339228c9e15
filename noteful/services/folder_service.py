"""
Service layer for folders. Same owner scoping as notes; deleting a folder
detaches it from the user's notes.
"""
from typing import Any, Dict, List, Mapping

from pymongo.errors import DuplicateKeyError

from noteful.core.ids import is_valid_id, to_object_id
from noteful.repositories import folder_repo, note_repo
from noteful.repositories.note_filters import compose_note_filter, owner_clause, scoped_id_filter
from noteful.services.errors import InvalidField, InvalidIdentifier, MissingField, NotFound
from noteful.services.note_shaper import shape_named

DUPLICATE_NAME = "The folder name already exists"


def parse_name(payload: Mapping[str, Any]) -> str:
    name = payload.get("name")
    if name is None or name == "":
        raise MissingField("name")
    if not isinstance(name, str):
        raise InvalidField("Field: name must be type String", "name")
    name = name.strip()
    if not name:
        raise MissingField("name")
    return name


def list_folders(user_id: str) -> List[Dict[str, Any]]:
    return [shape_named(d) for d in folder_repo.find_folders(owner_clause(user_id))]


def get_folder(user_id: str, folder_id: str) -> Dict[str, Any]:
    if not is_valid_id(folder_id):
        raise InvalidIdentifier("id")
    doc = folder_repo.find_folder(scoped_id_filter(user_id, folder_id))
    if doc is None:
        raise NotFound()
    return shape_named(doc)


def create_folder(user_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    name = parse_name(payload)
    try:
        doc = folder_repo.insert_folder({"userId": to_object_id(user_id), "name": name})
    except DuplicateKeyError:
        raise InvalidField(DUPLICATE_NAME, "name")
    return shape_named(doc)


def update_folder(user_id: str, folder_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    if not is_valid_id(folder_id):
        raise InvalidIdentifier("id")
    name = parse_name(payload)
    try:
        doc = folder_repo.update_folder(scoped_id_filter(user_id, folder_id), name)
    except DuplicateKeyError:
        raise InvalidField(DUPLICATE_NAME, "name")
    if doc is None:
        raise NotFound()
    return shape_named(doc)


def delete_folder(user_id: str, folder_id: str) -> None:
    """Idempotente: un id inexistente no es error."""
    removed = folder_repo.delete_folder(scoped_id_filter(user_id, folder_id))
    if removed is not None:
        note_repo.clear_folder(compose_note_filter(user_id, folder_id=str(removed["_id"])))
