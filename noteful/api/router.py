"""Agregador de routers de la API."""
from fastapi import APIRouter
from noteful.api.routers import auth, folders, health, notes, tags

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(notes.router)
api_router.include_router(folders.router)
api_router.include_router(tags.router)
