from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID
from datetime import datetime


class JobSeekerProfileUpdate(BaseModel):
    """Schema for saving job seeker profile - all fields optional"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    title: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=2000)
    location: Optional[str] = Field(None, max_length=255)
    skills: Optional[List[str]] = None
    experience: Optional[str] = None
    education: Optional[str] = None
    resume: Optional[str] = Field(None, max_length=255)
    linkedin: Optional[str] = Field(None, max_length=255)
    github: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=255)


class JobProviderProfileUpdate(BaseModel):
    """Schema for saving job provider profile - all fields optional"""
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    company_name: Optional[str] = Field(None, max_length=200)
    company_description: Optional[str] = Field(None, max_length=2000)
    industry: Optional[str] = Field(None, max_length=100)
    location: Optional[str] = Field(None, max_length=200)
    website: Optional[str] = None
    linkedin: Optional[str] = None
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)
    company_size: Optional[str] = None


class JobSeekerProfileResponse(BaseModel):
    id: UUID
    user_id: UUID
    title: Optional[str]
    bio: Optional[str]
    location: Optional[str]
    skills: List[str]
    experience: Optional[str]
    education: Optional[str]
    resume: Optional[str]
    linkedin: Optional[str]
    github: Optional[str]
    website: Optional[str]
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class JobProviderProfileResponse(BaseModel):
    id: UUID
    user_id: UUID
    company_name: Optional[str]
    company_description: Optional[str]
    industry: Optional[str]
    location: Optional[str]
    website: Optional[str]
    linkedin: Optional[str]
    founded_year: Optional[int]
    company_size: Optional[str]
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SuccessResponse(BaseModel):
    success: bool = True
