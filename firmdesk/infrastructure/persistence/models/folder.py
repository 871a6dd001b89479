"""Folder ORM model."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.infrastructure.persistence.database import Base
from firmdesk.infrastructure.persistence.models.mixins import TimestampedModel


class Folder(TimestampedModel, Base):
    """Personal document folder owned by its creator. Table: folders."""

    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_by_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id"), nullable=False, index=True
    )
