"""FirmSettings ORM model (singleton row)."""

from sqlalchemy import CheckConstraint, Integer, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from firmdesk.infrastructure.persistence.database import Base
from firmdesk.infrastructure.persistence.models.mixins import TimestampedModel

SINGLETON_KEY = 1


class FirmSettings(TimestampedModel, Base):
    """Firm metadata. Table: firm_settings.

    singleton_key is unique and pinned to SINGLETON_KEY, so the table can
    never hold more than one row.
    """

    __tablename__ = "firm_settings"
    __table_args__ = (
        UniqueConstraint("singleton_key", name="uq_firm_settings_singleton_key"),
        CheckConstraint(
            f"singleton_key = {SINGLETON_KEY}", name="ck_firm_settings_singleton"
        ),
    )

    singleton_key: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=SINGLETON_KEY,
        server_default=text(str(SINGLETON_KEY)),
    )
    firm_name: Mapped[str] = mapped_column(String, nullable=False)
    location: Mapped[str] = mapped_column(String, nullable=False)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
