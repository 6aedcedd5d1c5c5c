from pydantic import BaseModel, Field, field_validator
from uuid import UUID
from typing import List, Optional
from datetime import datetime
from jobboard.models.job import JobType, JobStatus


class JobCreate(BaseModel):
    title: str
    company: str
    location: str
    type: JobType
    salary: Optional[str] = None
    description: str
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    experience: Optional[str] = None
    education: Optional[str] = None
    industry: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    featured: bool = False

    @field_validator("title", "company", "description", "location")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        """Validate that string fields are not empty"""
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("skills")
    @classmethod
    def dedupe_skills(cls, v: List[str]) -> List[str]:
        seen = []
        for skill in (s.strip() for s in v):
            if skill and skill not in seen:
                seen.append(skill)
        return seen


class JobUpdate(BaseModel):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    type: Optional[JobType] = None
    salary: Optional[str] = None
    description: Optional[str] = None
    requirements: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    industry: Optional[str] = None
    skills: Optional[List[str]] = None
    status: Optional[JobStatus] = None  # CLOSED archives the posting
    featured: Optional[bool] = None


class JobFilters(BaseModel):
    """Loose filter bag accepted by the job listing"""
    search: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[JobType] = None
    # Overrides location with a "remote" match when true
    remote: Optional[bool] = None
    featured: bool = False
    limit: Optional[int] = Field(None, ge=1)


class JobResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: UUID
    user_id: UUID
    title: str
    company: str
    location: str
    type: JobType
    salary: Optional[str] = None
    description: str
    requirements: List[str]
    responsibilities: List[str]
    experience: Optional[str] = None
    education: Optional[str] = None
    industry: Optional[str] = None
    skills: List[str]
    status: JobStatus
    featured: bool
    created_at: datetime


class JobWithCountResponse(JobResponse):
    application_count: int = 0
