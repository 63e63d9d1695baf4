"""SQLAlchemy ORM model for the RequestRecord entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from request_desk.infrastructure.database.base import Base


class RequestRecordModel(Base):
    """ORM model — maps to the 'request_records' table."""

    __tablename__ = "request_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    # Free-text form fields carry no length rule, so their columns are unbounded
    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(12), nullable=False)
    department: Mapped[str] = mapped_column(Text, nullable=False)
    issue_date: Mapped[str] = mapped_column(Text, nullable=False)
    query: Mapped[str] = mapped_column(Text, nullable=False, default="")
    sms: Mapped[str] = mapped_column(Text, nullable=False)
    attachment: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_request_records_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<RequestRecordModel(id={self.id}, name='{self.name}')>"
