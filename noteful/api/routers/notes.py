"""
Endpoints para `notes`: listado con filtros, detalle, alta, reemplazo y baja.

Los errores tipados del servicio los traducen los handlers globales
(400 con `message`, 404 sin cuerpo).
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse

from noteful.api.deps import get_current_user
from noteful.api.schemas.note import NoteOut
from noteful.core.identity import AuthenticatedUser
from noteful.services import note_service


router = APIRouter(prefix="/notes", tags=["Notes"])


def location_for(request: Request, resource_id: str) -> str:
    return f"{str(request.url).split('?', 1)[0].rstrip('/')}/{resource_id}"


@router.get(
    "",
    response_model=List[NoteOut],
    summary="Listar notas",
    description="Notas del usuario filtradas por searchTerm (título), folderId y tagId.",
)
def list_notes(
    searchTerm: Optional[str] = Query(default=None),
    folderId: Optional[str] = Query(default=None),
    tagId: Optional[str] = Query(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    return note_service.list_notes(user.id, search_term=searchTerm, folder_id=folderId, tag_id=tagId)


@router.get("/{note_id}", response_model=NoteOut, summary="Obtener nota")
def get_note(note_id: str, user: AuthenticatedUser = Depends(get_current_user)):
    return note_service.get_note(user.id, note_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crear nota",
    responses={201: {"model": NoteOut, "description": "Nota creada (sin folderId si no se envió)"}},
)
def create_note(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    note_id, note = note_service.create_note(user.id, payload or {})
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=note,
        headers={"Location": location_for(request, note_id)},
    )


@router.put("/{note_id}", response_model=NoteOut, summary="Reemplazar nota")
def update_note(
    note_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    return note_service.update_note(user.id, note_id, payload or {})


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Borrar nota")
def delete_note(note_id: str, user: AuthenticatedUser = Depends(get_current_user)):
    note_service.delete_note(user.id, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
