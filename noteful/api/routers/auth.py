"""Rutas de usuarios y autenticación: registro, login y refresh del token."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from noteful.api.deps import get_current_user
from noteful.api.routers.notes import location_for
from noteful.api.schemas.user import LoginPayload, TokenOut, UserOut
from noteful.core.identity import AuthenticatedUser
from noteful.services import token_service, user_service

router = APIRouter(tags=["Auth"])


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    summary="Registrar usuario",
    responses={201: {"model": UserOut}},
)
def register(request: Request, payload: Optional[Dict[str, Any]] = Body(default=None)):
    user = user_service.create_user(payload or {})
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=user,
        headers={"Location": location_for(request, user["id"])},
    )


@router.post("/login", response_model=TokenOut, summary="Login local (username + password)")
def login(payload: LoginPayload) -> TokenOut:
    user = user_service.authenticate(payload.username, payload.password)
    token = token_service.create_access_token(user_id=user["id"], username=user["username"])
    return TokenOut(authToken=token)


@router.post("/refresh", response_model=TokenOut, summary="Renovar access token")
def refresh(user: AuthenticatedUser = Depends(get_current_user)) -> TokenOut:
    current = user_service.current_user(user.id)
    token = token_service.create_access_token(user_id=current["id"], username=current["username"])
    return TokenOut(authToken=token)
