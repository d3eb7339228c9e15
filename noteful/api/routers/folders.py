"""Endpoints para `folders`."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from noteful.api.deps import get_current_user
from noteful.api.routers.notes import location_for
from noteful.api.schemas.folder import FolderOut
from noteful.core.identity import AuthenticatedUser
from noteful.services import folder_service


router = APIRouter(prefix="/folders", tags=["Folders"])


@router.get("", response_model=List[FolderOut], summary="Listar folders")
def list_folders(user: AuthenticatedUser = Depends(get_current_user)):
    return folder_service.list_folders(user.id)


@router.get("/{folder_id}", response_model=FolderOut, summary="Obtener folder")
def get_folder(folder_id: str, user: AuthenticatedUser = Depends(get_current_user)):
    return folder_service.get_folder(user.id, folder_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Crear folder",
    responses={201: {"model": FolderOut}},
)
def create_folder(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    folder = folder_service.create_folder(user.id, payload or {})
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=folder,
        headers={"Location": location_for(request, folder["id"])},
    )


@router.put("/{folder_id}", response_model=FolderOut, summary="Renombrar folder")
def update_folder(
    folder_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    return folder_service.update_folder(user.id, folder_id, payload or {})


@router.delete("/{folder_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Borrar folder")
def delete_folder(folder_id: str, user: AuthenticatedUser = Depends(get_current_user)):
    folder_service.delete_folder(user.id, folder_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
