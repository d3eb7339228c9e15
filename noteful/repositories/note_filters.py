"""
Composición de filtros Mongo para la colección `note`.

Todo predicado empieza por la cláusula de dueño (`userId`); las cláusulas
opcionales se pliegan encima con AND. Los ids de folder/tag llegan ya
validados por el servicio.
"""
from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from noteful.core.ids import is_valid_id, to_object_id

Clause = Dict[str, Any]


def owner_clause(user_id: str) -> Clause:
    return {"userId": to_object_id(user_id)}


def title_clause(search_term: Optional[str], case_insensitive: bool = False) -> Optional[Clause]:
    """Coincidencia por subcadena en `title`; el término se escapa (no es regex)."""
    if not search_term:
        return None
    cond: Dict[str, Any] = {"$regex": re.escape(search_term)}
    if case_insensitive:
        cond["$options"] = "i"
    return {"title": cond}


def folder_clause(folder_id: Optional[str]) -> Optional[Clause]:
    if folder_id is None:
        return None
    return {"folderId": to_object_id(folder_id)}


def tag_clause(tag_id: Optional[str]) -> Optional[Clause]:
    if tag_id is None:
        return None
    # `tags` es un array: igualdad con un elemento == "contiene"
    return {"tags": to_object_id(tag_id)}


def id_clause(doc_id: str) -> Clause:
    # Un id mal formado se conserva como string: no coincide con ningún ObjectId
    return {"_id": to_object_id(doc_id) if is_valid_id(doc_id) else doc_id}


def combine(clauses: Tuple[Clause, ...]) -> Dict[str, Any]:
    """AND de las cláusulas, conservando el orden."""
    if len(clauses) == 1:
        return dict(clauses[0])
    return {"$and": [dict(c) for c in clauses]}


def compose_note_filter(
    user_id: str,
    *,
    search_term: Optional[str] = None,
    folder_id: Optional[str] = None,
    tag_id: Optional[str] = None,
    case_insensitive: bool = False,
) -> Dict[str, Any]:
    """Filtro de listado: dueño + (title ~ search_term) + folderId + tags."""
    optional = (
        title_clause(search_term, case_insensitive),
        folder_clause(folder_id),
        tag_clause(tag_id),
    )
    clauses = (owner_clause(user_id),) + tuple(c for c in optional if c is not None)
    return combine(clauses)


def scoped_id_filter(user_id: str, doc_id: str) -> Dict[str, Any]:
    """Filtro por dueño + `_id`; sirve para note, folder y tag."""
    return combine((owner_clause(user_id), id_clause(doc_id)))
