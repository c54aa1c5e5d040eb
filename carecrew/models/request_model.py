from pydantic import BaseModel, EmailStr
from typing import Optional


class Volunteer(BaseModel):
    email: EmailStr
    name: Optional[str] = None

    class Config:
        extra = "allow"


class RequestCreate(BaseModel):
    postId: str
    volunteer: Volunteer
    status: str = "requested"
    suggestion: Optional[str] = None

    class Config:
        extra = "allow"


class RequestUpdate(BaseModel):
    status: Optional[str] = None

    class Config:
        extra = "allow"
