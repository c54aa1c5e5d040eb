from datetime import datetime, timedelta, timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import HTTPException
from jose import jwt
from pydantic import EmailStr, TypeAdapter, ValidationError

from .config import settings


# JWT helpers
def create_access_token(data: dict, days: int | None = None) -> str:
    """Return a signed JWT carrying the identity payload in data."""
    exp_days = days if days is not None else settings.ACCESS_TOKEN_EXPIRE_DAYS
    expire = datetime.now(timezone.utc) + timedelta(days=exp_days)
    payload = data.copy()
    payload.update({"exp": int(expire.timestamp())})
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT, raising JWTError on failure."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


_email = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """Spell an address the way EmailStr stores it (domain lower-cased)."""
    try:
        return _email.validate_python(value.strip())
    except ValidationError:
        raise HTTPException(status_code=400, detail=f"Invalid email: {value}")


# Mongo helpers
def parse_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise HTTPException(status_code=400, detail=f"Invalid id: {value}")


def serialize_doc(doc: dict | None) -> dict | None:
    if doc is None:
        return None
    out = dict(doc)
    if "_id" in out:
        out["_id"] = str(out["_id"])
    return out


def write_result(result: Any) -> dict:
    """Render a pymongo write result the way the front-end reads it."""
    out: dict = {"acknowledged": result.acknowledged}
    if hasattr(result, "inserted_id"):
        out["insertedId"] = str(result.inserted_id)
    if hasattr(result, "matched_count"):
        out["matchedCount"] = result.matched_count
        out["modifiedCount"] = result.modified_count
        out["upsertedId"] = str(result.upserted_id) if result.upserted_id is not None else None
    if hasattr(result, "deleted_count"):
        out["deletedCount"] = result.deleted_count
    return out
