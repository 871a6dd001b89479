"""Document ORM model. Stored-file metadata attached to a case or a folder."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.infrastructure.persistence.database import Base
from firmdesk.infrastructure.persistence.models.mixins import TimestampedModel


class Document(TimestampedModel, Base):
    """Document. Table: documents. Exactly one of case_id / folder_id is set."""

    __tablename__ = "documents"

    name: Mapped[str] = mapped_column(String, nullable=False)
    type: Mapped[str] = mapped_column(String, nullable=False)
    mime_type: Mapped[str] = mapped_column(String, nullable=False)
    size: Mapped[str] = mapped_column(String, nullable=False)
    case_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("cases.id", ondelete="CASCADE"), nullable=True, index=True
    )
    folder_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("folders.id", ondelete="CASCADE"), nullable=True, index=True
    )
    uploaded_by_id: Mapped[str] = mapped_column(
        String, ForeignKey("users.id"), nullable=False, index=True
    )
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    storage_ref: Mapped[str] = mapped_column(String, nullable=False)

    __table_args__ = (
        CheckConstraint(
            "(case_id IS NULL) <> (folder_id IS NULL)",
            name="ck_documents_single_parent",
        ),
    )
