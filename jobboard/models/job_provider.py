import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import String, Integer, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.database import Base, utcnow


class JobProviderProfile(Base):
    __tablename__ = "job_provider_profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True
    )

    company_name: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )
    company_description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    industry: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )
    location: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )
    website: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )
    linkedin: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )
    founded_year: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True
    )
    company_size: Mapped[Optional[str]] = mapped_column(
        String,
        nullable=True
    )

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="job_provider_profile")
