from fastapi import APIRouter, Response

from ..config import settings
from ..schemas import Identity, Success
from .. import utils

router = APIRouter(tags=["auth"])


@router.post("/jwt", response_model=Success)
def issue_token(user: Identity, response: Response):
    token = utils.create_access_token(user.model_dump())
    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )
    return {"success": True}


@router.get("/logOut", response_model=Success)
def log_out(response: Response):
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite=settings.cookie_samesite,
    )
    return {"success": True}
