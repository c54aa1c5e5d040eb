import logging
from typing import Optional

from fastapi import Cookie, Depends, HTTPException, Query, Request
from jose import JWTError

from ..config import settings
from ..utils import decode_token, normalize_email

logger = logging.getLogger(__name__)


def get_current_user(token: Optional[str] = Cookie(None, alias=settings.COOKIE_NAME)) -> dict:
    """Decode the credential cookie, rejecting the call when it is absent or invalid."""
    if not token:
        raise HTTPException(status_code=401, detail="unauthorized access")
    try:
        payload = decode_token(token)
    except JWTError as e:
        logger.info("Rejected credential: %s", e)
        raise HTTPException(status_code=401, detail="unauthorized access")

    if not isinstance(payload.get("email"), str):
        raise HTTPException(status_code=401, detail="unauthorized access")
    try:
        payload["email"] = normalize_email(payload["email"])
    except HTTPException:
        raise HTTPException(status_code=401, detail="unauthorized access")
    return payload


def _check_owner(user: dict, email: str) -> str:
    email = normalize_email(email)
    if user["email"] != email:
        logger.warning("Credential for %s asked for records of %s", user.get("email"), email)
        raise HTTPException(status_code=403, detail="forbidden access")
    return email


def require_owner(email: str = Query(...), user: dict = Depends(get_current_user)) -> str:
    """Access guard for views filtered by an ?email= query parameter."""
    return _check_owner(user, email)


def optional_owner(request: Request, email: Optional[str] = Query(None)) -> Optional[str]:
    """Like require_owner, but only when the caller actually filters by email."""
    if email is None:
        return None
    user = get_current_user(request.cookies.get(settings.COOKIE_NAME))
    return _check_owner(user, email)
