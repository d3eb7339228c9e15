"""
Service layer for notes: validation, owner-scoped queries and response shaping.

Every operation takes the authenticated user id as its first argument; it is the
only source of ownership. Validation errors are raised before any storage call.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from bson import ObjectId

from noteful.core.config import settings
from noteful.core.ids import is_valid_id, to_object_id
from noteful.repositories import folder_repo, note_repo, tag_repo
from noteful.repositories.note_filters import compose_note_filter, scoped_id_filter
from noteful.services.errors import InvalidField, InvalidIdentifier, MissingField, NotFound
from noteful.services.note_shaper import shape_note

_log = logging.getLogger("noteful.notes")

TAGS_NOT_ARRAY = "The tags property must be an array"
TAGS_INVALID_ID = "The tags array contains an invalid id"


@dataclass(frozen=True)
class NoteDraft:
    """Campos mutables de una nota ya validados."""

    title: str
    content: Optional[str] = None
    folder_oid: Optional[ObjectId] = None
    tag_oids: Tuple[ObjectId, ...] = ()

    def as_fields(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "folderId": self.folder_oid,
            "tags": list(self.tag_oids),
        }


def _optional_id(value: Optional[str], field: str) -> Optional[str]:
    """'' equivale a ausente; un id mal formado es InvalidIdentifier."""
    if value is None or value == "":
        return None
    if not is_valid_id(value):
        raise InvalidIdentifier(field)
    return value


def _require_id(note_id: str) -> None:
    if not is_valid_id(note_id):
        raise InvalidIdentifier("id")


def _parse_draft(payload: Mapping[str, Any]) -> NoteDraft:
    """Valida el body (title, content, folderId, tags) sin tocar storage."""
    title = payload.get("title")
    if title is None or title == "":
        raise MissingField("title")
    if not isinstance(title, str):
        raise InvalidField("Field: title must be type String", "title")
    if not title.strip():
        raise MissingField("title")

    content = payload.get("content")
    if content is not None and not isinstance(content, str):
        raise InvalidField("Field: content must be type String", "content")

    raw_folder = payload.get("folderId")
    if raw_folder is not None and not isinstance(raw_folder, str):
        raise InvalidIdentifier("folderId")
    folder_id = _optional_id(raw_folder, "folderId")

    raw_tags = payload.get("tags")
    if raw_tags is None:
        raw_tags = []
    if not isinstance(raw_tags, list):
        raise InvalidField(TAGS_NOT_ARRAY, "tags")
    tag_oids: List[ObjectId] = []
    for tag in raw_tags:
        if not is_valid_id(tag):
            raise InvalidField(TAGS_INVALID_ID, "tags")
        oid = to_object_id(tag)
        if oid not in tag_oids:
            tag_oids.append(oid)

    return NoteDraft(
        title=title,
        content=content,
        folder_oid=to_object_id(folder_id) if folder_id else None,
        tag_oids=tuple(tag_oids),
    )


def _check_references(user_id: str, draft: NoteDraft) -> None:
    """Folder y tags deben pertenecer al mismo usuario."""
    if draft.folder_oid is not None and not folder_repo.is_owned(user_id, draft.folder_oid):
        raise InvalidIdentifier("folderId")
    if draft.tag_oids and tag_repo.count_owned(user_id, draft.tag_oids) != len(draft.tag_oids):
        raise InvalidField(TAGS_INVALID_ID, "tags")


def list_notes(
    user_id: str,
    *,
    search_term: Optional[str] = None,
    folder_id: Optional[str] = None,
    tag_id: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Notas del usuario filtradas por título, folder y tag (AND)."""
    filtro = compose_note_filter(
        user_id,
        search_term=search_term,
        folder_id=_optional_id(folder_id, "folderId"),
        tag_id=_optional_id(tag_id, "tagId"),
        case_insensitive=settings.notes_search_case_insensitive,
    )
    return [shape_note(doc) for doc in note_repo.find_notes(filtro)]


def get_note(user_id: str, note_id: str) -> Dict[str, Any]:
    _require_id(note_id)
    doc = note_repo.find_note(scoped_id_filter(user_id, note_id))
    if doc is None:
        raise NotFound()
    return shape_note(doc)


def create_note(user_id: str, payload: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """Crea la nota; devuelve (id, nota formateada sin `folderId` si no hay folder)."""
    draft = _parse_draft(payload)
    _check_references(user_id, draft)
    doc = {"userId": to_object_id(user_id), **draft.as_fields()}
    if draft.folder_oid is None:
        doc.pop("folderId")
    saved = note_repo.insert_note(doc)
    note_id = str(saved["_id"])
    _log.info("note created id=%s user=%s", note_id, user_id)
    return note_id, shape_note(saved, omit_empty_folder=True)


def update_note(user_id: str, note_id: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Reemplazo completo de title/content/folderId/tags; id y dueño no cambian."""
    _require_id(note_id)
    draft = _parse_draft(payload)
    _check_references(user_id, draft)
    doc = note_repo.update_note(scoped_id_filter(user_id, note_id), draft.as_fields())
    if doc is None:
        raise NotFound()
    return shape_note(doc)


def delete_note(user_id: str, note_id: str) -> None:
    """Borra por dueño + id. Un id inexistente (o mal formado) no es error."""
    deleted = note_repo.delete_note(scoped_id_filter(user_id, note_id))
    _log.info("note delete id=%s user=%s deleted=%s", note_id, user_id, deleted)
