"""
Formato externo de los documentos persistidos (note, folder, tag, user).
"""
from typing import Any, Dict

from noteful.core.ids import id_str
from noteful.core.time import iso_utc


def shape_note(doc: Dict[str, Any], *, omit_empty_folder: bool = False) -> Dict[str, Any]:
    """Nota persistida -> {id, userId, title, content, createdAt, updatedAt, folderId, tags}.

    Con `omit_empty_folder=True` (respuesta de creación) la clave `folderId`
    no aparece cuando la nota no tiene folder; en el resto va como null.
    """
    out: Dict[str, Any] = {
        "id": id_str(doc["_id"]),
        "userId": id_str(doc["userId"]),
        "title": doc.get("title"),
        "content": doc.get("content"),
        "createdAt": iso_utc(doc.get("createdAt")),
        "updatedAt": iso_utc(doc.get("updatedAt")),
    }
    folder_id = doc.get("folderId")
    if folder_id is not None or not omit_empty_folder:
        out["folderId"] = id_str(folder_id)
    out["tags"] = [id_str(t) for t in doc.get("tags") or []]
    return out


def shape_named(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Folder/tag -> {id, userId, name, createdAt, updatedAt}."""
    return {
        "id": id_str(doc["_id"]),
        "userId": id_str(doc["userId"]),
        "name": doc.get("name"),
        "createdAt": iso_utc(doc.get("createdAt")),
        "updatedAt": iso_utc(doc.get("updatedAt")),
    }


def shape_user(doc: Dict[str, Any]) -> Dict[str, Any]:
    # Nunca expone el hash
    return {
        "id": id_str(doc["_id"]),
        "fullname": doc.get("fullname", ""),
        "username": doc.get("username"),
    }
