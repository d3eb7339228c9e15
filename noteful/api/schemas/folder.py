"""Esquemas de salida para `folders` y `tags` (mismo formato)."""
from pydantic import BaseModel


class NamedOut(BaseModel):
    id: str
    userId: str
    name: str
    createdAt: str
    updatedAt: str


FolderOut = NamedOut
TagOut = NamedOut
