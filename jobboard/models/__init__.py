from jobboard.models.user import User, UserRole
from jobboard.models.job_seeker import JobSeekerProfile
from jobboard.models.job_provider import JobProviderProfile
from jobboard.models.job import Job, JobType, JobStatus
from jobboard.models.application import Application, ApplicationStatus
