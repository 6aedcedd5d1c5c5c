# jobboard/schema/application_schema.py
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime
from jobboard.models.application import ApplicationStatus
from jobboard.schema.job_schema import JobResponse
from jobboard.schema.user_schema import ApplicantResponse


class ApplicationCreate(BaseModel):
    """Job seeker creates application"""
    job_id: UUID
    cover_letter: str = Field(..., min_length=1, max_length=5000)


class ApplicationStatusUpdate(BaseModel):
    """Job provider updates application status"""
    status: ApplicationStatus


class ApplicationResponse(BaseModel):
    id: UUID
    job_id: UUID
    user_id: UUID
    status: ApplicationStatus
    cover_letter: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ApplicationWithJobResponse(ApplicationResponse):
    """Seeker view: application with the job it targets"""
    job: JobResponse


class ReceivedApplicationResponse(ApplicationWithJobResponse):
    """Provider view: also carries the applicant identity"""
    user: ApplicantResponse
