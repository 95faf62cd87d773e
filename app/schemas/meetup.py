from datetime import datetime
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, Field, StringConstraints, field_serializer

from app.core.database import MAX_DB_ID
from app.core.dates import iso_z_from_utc_naive
from .user import OwnerSummary

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class MeetupStore(BaseModel):
    """Body de POST /meetups y PUT /meetups/{id} (PUT reemplaza todos los campos)."""

    banner_id: int = Field(ge=1, le=MAX_DB_ID)
    title: NonEmptyStr
    description: NonEmptyStr
    # "adress" es el nombre que usaban los clientes antiguos
    address: NonEmptyStr = Field(validation_alias=AliasChoices("address", "adress"))
    date: datetime


class BannerSummary(BaseModel):
    url: str
    name: str

    class Config:
        from_attributes = True


class MeetupSummary(BaseModel):
    id: int
    date: datetime
    description: str
    address: str
    banner: BannerSummary
    owner: OwnerSummary

    class Config:
        from_attributes = True

    @field_serializer("date")
    def _date_z(self, dt: datetime) -> str:
        return iso_z_from_utc_naive(dt)


class MeetupPublic(BaseModel):
    id: int
    user_id: int
    banner_id: int
    title: str
    description: str
    address: str
    date: datetime
    canceled_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_serializer("date", "canceled_at", "created_at", "updated_at")
    def _dates_z(self, dt: Optional[datetime]) -> Optional[str]:
        return iso_z_from_utc_naive(dt)


class MessageResponse(BaseModel):
    message: str
