from pydantic import BaseModel, EmailStr

class UserPublic(BaseModel):
    id: int
    name: str
    email: EmailStr


class OwnerSummary(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
