"""
Registro de usuarios y verificación de credenciales (argon2).
"""
from typing import Any, Dict, Mapping

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type
from pymongo.errors import DuplicateKeyError

from noteful.repositories import user_repo
from noteful.services.errors import InvalidCredentials, InvalidField, MissingField
from noteful.services.note_shaper import shape_user

ph = PasswordHasher(time_cost=2, memory_cost=51200, parallelism=2, hash_len=32, salt_len=16, type=Type.ID)

REQUIRED_FIELDS = ("username", "password")
STRING_FIELDS = ("username", "password", "fullname")
TRIMMED_FIELDS = ("username", "password")
SIZED_FIELDS = {"username": (1, None), "password": (8, 72)}


def hash_password(password: str) -> str:
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return ph.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def _validate(payload: Mapping[str, Any]) -> Dict[str, str]:
    for field in REQUIRED_FIELDS:
        if field not in payload or payload.get(field) is None:
            raise MissingField(field)
    for field in STRING_FIELDS:
        if field in payload and payload[field] is not None and not isinstance(payload[field], str):
            raise InvalidField(f"Field: {field} must be type String", field)
    for field in TRIMMED_FIELDS:
        if payload[field].strip() != payload[field]:
            raise InvalidField(f"Field: {field} cannot start or end with whitespace", field)
    for field, (low, high) in SIZED_FIELDS.items():
        size = len(payload[field])
        if size < low:
            raise InvalidField(f"Field: {field} must be at least {low} characters long", field)
        if high is not None and size > high:
            raise InvalidField(f"Field: {field} must be at most {high} characters long", field)
    return {
        "username": payload["username"],
        "password": payload["password"],
        "fullname": (payload.get("fullname") or "").strip(),
    }


def create_user(payload: Mapping[str, Any]) -> Dict[str, Any]:
    data = _validate(payload)
    doc = {
        "username": data["username"],
        "fullname": data["fullname"],
        "password": hash_password(data["password"]),
    }
    try:
        saved = user_repo.insert_user(doc)
    except DuplicateKeyError:
        raise InvalidField("The username already exists", "username")
    return shape_user(saved)


def current_user(user_id: str) -> Dict[str, Any]:
    """Usuario del token; InvalidCredentials si ya no existe."""
    u = user_repo.get_user_by_id(user_id)
    if not u:
        raise InvalidCredentials("Unauthorized")
    return shape_user(u)


def authenticate(username: Any, password: Any) -> Dict[str, Any]:
    """Devuelve el usuario (formateado) o lanza InvalidCredentials."""
    if not isinstance(username, str) or not isinstance(password, str):
        raise InvalidCredentials()
    u = user_repo.find_user_by_username(username)
    if not u or not verify_password(password, u.get("password", "")):
        raise InvalidCredentials()
    return shape_user(u)
