"""Endpoints para `tags`."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from noteful.api.deps import get_current_user
from noteful.api.routers.notes import location_for
from noteful.api.schemas.folder import TagOut
from noteful.core.identity import AuthenticatedUser
from noteful.services import tag_service


router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get("", response_model=List[TagOut], summary="Listar tags")
def list_tags(user: AuthenticatedUser = Depends(get_current_user)):
    return tag_service.list_tags(user.id)


@router.get("/{tag_id}", response_model=TagOut, summary="Obtener tag")
def get_tag(tag_id: str, user: AuthenticatedUser = Depends(get_current_user)):
    return tag_service.get_tag(user.id, tag_id)


@router.post("", status_code=status.HTTP_201_CREATED, summary="Crear tag", responses={201: {"model": TagOut}})
def create_tag(
    request: Request,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    tag = tag_service.create_tag(user.id, payload or {})
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=tag,
        headers={"Location": location_for(request, tag["id"])},
    )


@router.put("/{tag_id}", response_model=TagOut, summary="Renombrar tag")
def update_tag(
    tag_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
):
    return tag_service.update_tag(user.id, tag_id, payload or {})


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Borrar tag")
def delete_tag(tag_id: str, user: AuthenticatedUser = Depends(get_current_user)):
    tag_service.delete_tag(user.id, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
