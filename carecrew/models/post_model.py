from pydantic import AliasChoices, BaseModel, EmailStr, Field
from typing import Optional


class Organizer(BaseModel):
    email: EmailStr
    name: Optional[str] = None

    class Config:
        extra = "allow"


class PostCreate(BaseModel):
    # the front-end sends postTitle; plain title is accepted too
    postTitle: str = Field(validation_alias=AliasChoices("postTitle", "title"))
    category: str
    organizer: Organizer
    volunteersNeeded: int = Field(ge=0)
    description: Optional[str] = None
    location: Optional[str] = None
    thumbnail: Optional[str] = None
    deadline: Optional[str] = None

    class Config:
        extra = "allow"


class PostUpdate(BaseModel):
    postTitle: Optional[str] = Field(default=None, validation_alias=AliasChoices("postTitle", "title"))
    category: Optional[str] = None
    organizer: Optional[Organizer] = None
    volunteersNeeded: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    location: Optional[str] = None
    thumbnail: Optional[str] = None
    deadline: Optional[str] = None

    class Config:
        extra = "allow"
