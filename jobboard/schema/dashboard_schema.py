from pydantic import BaseModel
from typing import List
from jobboard.schema.application_schema import ApplicationWithJobResponse, ReceivedApplicationResponse
from jobboard.schema.job_schema import JobResponse, JobWithCountResponse


class JobSeekerStats(BaseModel):
    applications: int
    recent_applications: int      # last 30 days
    interviews: int
    upcoming_interviews: int      # INTERVIEW updated in last 7 days


class JobSeekerDashboardResponse(BaseModel):
    recent_applications: List[ApplicationWithJobResponse]
    recommended_jobs: List[JobResponse]
    stats: JobSeekerStats


class JobProviderStats(BaseModel):
    active_jobs: int
    total_applications: int
    new_applications: int         # last 7 days
    interviews: int
    upcoming_interviews: int      # INTERVIEW updated in last 7 days


class JobProviderDashboardResponse(BaseModel):
    jobs: List[JobWithCountResponse]
    recent_applications: List[ReceivedApplicationResponse]
    stats: JobProviderStats
