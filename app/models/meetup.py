from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.database import Base
from app.core.dates import utc_now_naive
from app.models.file import File
from app.models.user import User


class Meetup(Base):
    __tablename__ = "meetups"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    banner_id: Mapped[int] = mapped_column(ForeignKey("files.id"), nullable=False)

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(String(255), nullable=False)

    # UTC naive (ver core/dates.py)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    canceled_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utc_now_naive, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, onupdate=utc_now_naive, nullable=False
    )

    owner: Mapped[User] = relationship(User)
    banner: Mapped[File] = relationship(File)
