"""PracticeArea and UserPracticeArea ORM models."""

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.infrastructure.persistence.database import Base
from firmdesk.infrastructure.persistence.models.mixins import CreatedModel


class PracticeArea(CreatedModel, Base):
    """Legal specialization. Table: practice_areas. Name is unique."""

    __tablename__ = "practice_areas"

    name: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class UserPracticeArea(CreatedModel, Base):
    """User <-> practice area link. Table: user_practice_areas."""

    __tablename__ = "user_practice_areas"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    practice_area_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("practice_areas.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
