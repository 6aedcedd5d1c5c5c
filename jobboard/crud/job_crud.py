import logging
from typing import List, Optional
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Query, Session

from jobboard.exceptions import InvalidJobUpdateError
from jobboard.models.job import Job, JobStatus
from jobboard.models.user import UserRole
from jobboard.schema.auth_schema import CurrentUser
from jobboard.schema.job_schema import JobFilters, JobUpdate
from jobboard.utils.guards import require_owner, require_role
from jobboard.utils.revalidation import revalidate_path

logger = logging.getLogger(__name__)

FEATURED_JOBS_LIMIT = 6

# Fields a provider may edit; a None value clears the optional ones
UPDATABLE_FIELDS = frozenset(JobUpdate.model_fields)
REQUIRED_FIELDS = frozenset({
    "title", "company", "location", "type", "description",
    "requirements", "responsibilities", "skills", "status", "featured",
})


def create_job(db: Session, current_user: Optional[CurrentUser], **job_data) -> Job:
    current_user = require_role(current_user, UserRole.JOB_PROVIDER)

    job_data.pop("status", None)
    job = Job(user_id=current_user.id, status=JobStatus.ACTIVE, **job_data)
    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info("User %s posted job %s", current_user.id, job.id)
    revalidate_path("/dashboard", "/jobs")
    return job


def get_job_by_id(db: Session, job_id: uuid.UUID) -> Optional[Job]:
    return db.query(Job).filter(Job.id == job_id).first()


def update_job(db: Session, current_user: Optional[CurrentUser], job_id: uuid.UUID, **kwargs) -> Optional[Job]:
    """Edit a posting; setting status to CLOSED is how a job is archived"""
    current_user = require_role(current_user, UserRole.JOB_PROVIDER)

    job = get_job_by_id(db, job_id)
    if not job:
        return None
    require_owner(current_user, job.user_id)

    for key, value in kwargs.items():
        if key not in UPDATABLE_FIELDS:
            raise InvalidJobUpdateError(key, "cannot be updated")
        if value is None and key in REQUIRED_FIELDS:
            raise InvalidJobUpdateError(key, "cannot be cleared")
        setattr(job, key, value)

    db.commit()
    db.refresh(job)

    logger.info("User %s updated job %s", current_user.id, job.id)
    revalidate_path("/dashboard", "/jobs", f"/jobs/{job.id}")
    return job


def build_job_query(db: Session, filters: Optional[JobFilters] = None) -> Query:
    """Translate a filter bag into a query over ACTIVE jobs, newest first"""
    filters = filters or JobFilters()
    query = db.query(Job).filter(Job.status == JobStatus.ACTIVE)

    if filters.featured:
        query = query.filter(Job.featured == True)

    if filters.search:
        # % and _ are matched literally
        query = query.filter(
            or_(
                Job.title.icontains(filters.search, autoescape=True),
                Job.company.icontains(filters.search, autoescape=True),
                Job.description.icontains(filters.search, autoescape=True)
            )
        )

    if filters.job_type:
        query = query.filter(Job.type == filters.job_type)

    # remote=true replaces any explicit location
    location = "remote" if filters.remote else filters.location
    if location:
        query = query.filter(Job.location.icontains(location, autoescape=True))

    query = query.order_by(Job.created_at.desc())

    if filters.limit:
        query = query.limit(filters.limit)

    return query


def get_jobs(db: Session, filters: Optional[JobFilters] = None) -> List[Job]:
    return build_job_query(db, filters).all()


def get_featured_jobs(db: Session, limit: int = FEATURED_JOBS_LIMIT) -> List[Job]:
    return get_jobs(db, JobFilters(featured=True, limit=limit))
