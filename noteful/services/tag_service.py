"""
Service layer for tags. Deleting a tag pulls it from the user's notes.
"""
from typing import Any, Dict, List, Mapping

from pymongo.errors import DuplicateKeyError

from noteful.core.ids import is_valid_id, to_object_id
from noteful.repositories import note_repo, tag_repo
from noteful.repositories.note_filters import compose_note_filter, owner_clause, scoped_id_filter
from noteful.services.errors import InvalidField, InvalidIdentifier, NotFound
from noteful.services.folder_service import parse_name
from noteful.services.note_shaper import shape_named

DUPLICATE_NAME = "The tag name already exists"


def list_tags(user_id: str) -> List[Dict[str, Any]]:
    return [shape_named(d) for d in tag_repo.find_tags(owner_clause(user_id))]


def get_tag(user_id: str, tag_id: str) -> Dict[str, Any]:
    if not is_valid_id(tag_id):
        raise InvalidIdentifier("id")
    doc = tag_repo.find_tag(scoped_id_filter(user_id, tag_id))
    if doc is None:
        raise NotFound()
    return shape_named(doc)


def create_tag(user_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    name = parse_name(payload)
    try:
        doc = tag_repo.insert_tag({"userId": to_object_id(user_id), "name": name})
    except DuplicateKeyError:
        raise InvalidField(DUPLICATE_NAME, "name")
    return shape_named(doc)


def update_tag(user_id: str, tag_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    if not is_valid_id(tag_id):
        raise InvalidIdentifier("id")
    name = parse_name(payload)
    try:
        doc = tag_repo.update_tag(scoped_id_filter(user_id, tag_id), name)
    except DuplicateKeyError:
        raise InvalidField(DUPLICATE_NAME, "name")
    if doc is None:
        raise NotFound()
    return shape_named(doc)


def delete_tag(user_id: str, tag_id: str) -> None:
    removed = tag_repo.delete_tag(scoped_id_filter(user_id, tag_id))
    if removed is not None:
        tag_oid = removed["_id"]
        note_repo.pull_tag(compose_note_filter(user_id, tag_id=str(tag_oid)), tag_oid)
