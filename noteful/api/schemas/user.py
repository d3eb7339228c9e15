"""
Esquemas Pydantic para usuarios y autenticación.
"""
from pydantic import BaseModel


class UserOut(BaseModel):
    id: str
    fullname: str = ""
    username: str


class LoginPayload(BaseModel):
    username: str
    password: str


class TokenOut(BaseModel):
    authToken: str
