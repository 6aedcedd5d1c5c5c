import logging
from datetime import datetime, timedelta
from itertools import islice
from typing import List, Optional
import uuid

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from jobboard.crud.application_crud import provider_applications_query
from jobboard.database import utcnow
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job, JobStatus
from jobboard.models.job_seeker import JobSeekerProfile
from jobboard.models.user import UserRole
from jobboard.schema.auth_schema import CurrentUser
from jobboard.utils.guards import require_role

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5
RECOMMENDED_LIMIT = 5
SEEKER_RECENT_WINDOW = timedelta(days=30)
WEEK = timedelta(days=7)


def get_recommended_jobs(
    db: Session,
    user_id: uuid.UUID,
    skills: Optional[List[str]] = None,
    limit: int = RECOMMENDED_LIMIT
) -> List[Job]:
    """
    ACTIVE jobs the seeker has not applied to, newest first.

    With skills, only jobs sharing at least one skill qualify.
    """
    query = (
        db.query(Job)
        .filter(
            Job.status == JobStatus.ACTIVE,
            ~Job.applications.any(Application.user_id == user_id)
        )
        .order_by(Job.created_at.desc())
    )

    if not skills:
        return query.limit(limit).all()

    wanted = set(skills)
    # skills are stored as JSON lists, so overlap is checked in Python
    matching = (job for job in query if wanted.intersection(job.skills or []))
    return list(islice(matching, limit))


def get_job_seeker_dashboard_data(
    db: Session,
    current_user: Optional[CurrentUser],
    now: Optional[datetime] = None
) -> dict:
    current_user = require_role(current_user, UserRole.JOB_SEEKER)
    now = now or utcnow()
    user_id = current_user.id

    recent_applications = (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.user_id == user_id)
        .order_by(Application.created_at.desc())
        .limit(RECENT_LIMIT)
        .all()
    )

    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == user_id).first()
    recommended_jobs = get_recommended_jobs(db, user_id, profile.skills if profile else None)

    mine = db.query(Application).filter(Application.user_id == user_id)
    interviews = mine.filter(Application.status == ApplicationStatus.INTERVIEW)

    logger.debug("Building job seeker dashboard for %s", user_id)
    stats = {
        "applications": mine.count(),
        "recent_applications": mine.filter(Application.created_at >= now - SEEKER_RECENT_WINDOW).count(),
        "interviews": interviews.count(),
        # recently moved to INTERVIEW; there is no scheduled date to look at
        "upcoming_interviews": interviews.filter(Application.updated_at >= now - WEEK).count(),
    }

    return {
        "recent_applications": recent_applications,
        "recommended_jobs": recommended_jobs,
        "stats": stats,
    }


def get_job_provider_dashboard_data(
    db: Session,
    current_user: Optional[CurrentUser],
    now: Optional[datetime] = None
) -> dict:
    current_user = require_role(current_user, UserRole.JOB_PROVIDER)
    now = now or utcnow()
    provider_id = current_user.id

    jobs = (
        db.query(Job)
        .filter(Job.user_id == provider_id)
        .order_by(Job.created_at.desc())
        .all()
    )

    counts = dict(
        db.query(Application.job_id, func.count(Application.id))
        .join(Job, Application.job_id == Job.id)
        .filter(Job.user_id == provider_id)
        .group_by(Application.job_id)
        .all()
    )
    for job in jobs:
        job.application_count = counts.get(job.id, 0)

    recent_applications = provider_applications_query(db, provider_id).limit(RECENT_LIMIT).all()

    received = (
        db.query(Application)
        .join(Job, Application.job_id == Job.id)
        .filter(Job.user_id == provider_id)
    )
    interviews = received.filter(Application.status == ApplicationStatus.INTERVIEW)

    logger.debug("Building job provider dashboard for %s", provider_id)
    stats = {
        "active_jobs": db.query(Job).filter(Job.user_id == provider_id, Job.status == JobStatus.ACTIVE).count(),
        "total_applications": received.count(),
        "new_applications": received.filter(Application.created_at >= now - WEEK).count(),
        "interviews": interviews.count(),
        "upcoming_interviews": interviews.filter(Application.updated_at >= now - WEEK).count(),
    }

    return {
        "jobs": jobs,
        "recent_applications": recent_applications,
        "stats": stats,
    }
