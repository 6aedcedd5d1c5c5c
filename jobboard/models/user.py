import enum
import uuid
from datetime import datetime
from typing import Optional, Union

from sqlalchemy import String, DateTime, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.database import Base, utcnow


class UserRole(str, enum.Enum):
    JOB_SEEKER = "JOB_SEEKER"
    JOB_PROVIDER = "JOB_PROVIDER"


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    # Fixed at registration
    role: Mapped[UserRole] = mapped_column(SQLEnum(UserRole, name="user_role_enum"), nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    job_seeker_profile = relationship(
        "JobSeekerProfile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    job_provider_profile = relationship(
        "JobProviderProfile", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    jobs = relationship("Job", back_populates="provider", cascade="all, delete-orphan")
    applications = relationship("Application", back_populates="user", cascade="all, delete-orphan")

    @property
    def profile(self) -> Optional[Union["JobSeekerProfile", "JobProviderProfile"]]:
        """The role-specific profile; the other relationship is never populated"""
        if self.role == UserRole.JOB_SEEKER:
            return self.job_seeker_profile
        return self.job_provider_profile
