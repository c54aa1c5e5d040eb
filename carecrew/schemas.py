from pydantic import BaseModel, EmailStr


class Identity(BaseModel):
    """Payload signed into the credential cookie."""
    email: EmailStr

    class Config:
        extra = "allow"


class Success(BaseModel):
    success: bool = True


class Count(BaseModel):
    count: int
