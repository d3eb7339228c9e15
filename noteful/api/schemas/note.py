"""
Esquemas Pydantic de salida para `notes`.

La entrada se recibe como dict y la valida el servicio, que devuelve los
mensajes 400 del contrato (p. ej. "Missing title in request body").
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class NoteOut(BaseModel):
    id: str
    userId: str
    title: str
    content: Optional[str] = None
    createdAt: str
    updatedAt: str
    folderId: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
