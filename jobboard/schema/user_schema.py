from pydantic import BaseModel, EmailStr, Field
from typing import Annotated, Literal, Optional, Union
from uuid import UUID
from datetime import datetime
from jobboard.models.user import UserRole
from jobboard.schema.profile_schema import JobSeekerProfileResponse, JobProviderProfileResponse

# ----------------- User creation -----------------
class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole

# ----------------- User response -----------------
class UserResponse(BaseModel):
    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime

    model_config = {
        "from_attributes": True
    }

class ApplicantResponse(BaseModel):
    """Applicant identity shown to job providers"""
    id: UUID
    name: str
    email: str

    model_config = {"from_attributes": True}

# ----------------- User with profile -----------------
class JobSeekerUserResponse(UserResponse):
    role: Literal[UserRole.JOB_SEEKER]
    profile: Optional[JobSeekerProfileResponse] = None

class JobProviderUserResponse(UserResponse):
    role: Literal[UserRole.JOB_PROVIDER]
    profile: Optional[JobProviderProfileResponse] = None

# Tagged by role: a user only ever carries the profile shape of its role
UserProfileResponse = Annotated[
    Union[JobSeekerUserResponse, JobProviderUserResponse],
    Field(discriminator="role")
]
