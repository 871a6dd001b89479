"""Case, CaseAssignment and CaseNumberSequence ORM models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from firmdesk.domain.enums import CaseStatus
from firmdesk.infrastructure.persistence.database import Base
from firmdesk.infrastructure.persistence.models.mixins import (
    CuidMixin,
    TimestampedModel,
)


class Case(TimestampedModel, Base):
    """Legal matter. Table: cases. case_number is unique (PREFIX-YYYY-NNNN)."""

    __tablename__ = "cases"

    case_number: Mapped[str] = mapped_column(String, nullable=False, unique=True)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    client_name: Mapped[str] = mapped_column(String, nullable=False)
    practice_area_id: Mapped[str] = mapped_column(
        String, ForeignKey("practice_areas.id"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=CaseStatus.PENDING.value
    )
    created_by_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id"), nullable=False, index=True
    )


class CaseAssignment(CuidMixin, Base):
    """User granted access to work a case. Table: case_assignments.

    (case_id, user_id) is intentionally not unique: duplicates are accepted.
    """

    __tablename__ = "case_assignments"

    case_id: Mapped[str] = mapped_column(
        String, ForeignKey("cases.id"), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id"), nullable=False, index=True
    )
    assigned_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class CaseNumberSequence(Base):
    """Per (prefix, year) counter for case numbers. Table: case_number_sequence."""

    __tablename__ = "case_number_sequence"

    prefix: Mapped[str] = mapped_column(String, primary_key=True)
    year: Mapped[int] = mapped_column(Integer, primary_key=True)
    last_value: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
