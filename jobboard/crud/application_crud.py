# jobboard/crud/application_crud.py
import logging
from typing import List, Optional, Union
import uuid

from sqlalchemy import and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.exceptions import (
    DuplicateApplicationError,
    InvalidStatusError,
    JobClosedError,
    NotFoundError,
    UnauthorizedError,
)
from jobboard.models.application import Application, ApplicationStatus
from jobboard.models.job import Job, JobStatus
from jobboard.models.user import UserRole
from jobboard.schema.auth_schema import CurrentUser
from jobboard.utils.guards import require_owner, require_role
from jobboard.utils.revalidation import revalidate_path

logger = logging.getLogger(__name__)


def parse_status(status: Union[str, ApplicationStatus]) -> ApplicationStatus:
    try:
        return ApplicationStatus(status)
    except ValueError:
        raise InvalidStatusError(status)


def get_existing_application(db: Session, job_id: uuid.UUID, user_id: uuid.UUID) -> Optional[Application]:
    return db.query(Application).filter(
        and_(
            Application.job_id == job_id,
            Application.user_id == user_id
        )
    ).first()


def apply_for_job(
    db: Session,
    current_user: Optional[CurrentUser],
    job_id: uuid.UUID,
    cover_letter: str
) -> Application:
    """
    Job seeker applies to a job.

    The insert itself is the duplicate check: the (job_id, user_id) unique
    constraint rejects a second application, including one racing in from
    a concurrent request.
    """
    current_user = require_role(current_user, UserRole.JOB_SEEKER)

    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError("Job not found")
    if job.status != JobStatus.ACTIVE:
        raise JobClosedError()

    application = Application(
        job_id=job_id,
        user_id=current_user.id,
        cover_letter=cover_letter,
        status=ApplicationStatus.PENDING
    )

    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if get_existing_application(db, job_id, current_user.id):
            logger.warning("User %s already applied to job %s", current_user.id, job_id)
            raise DuplicateApplicationError()
        raise
    db.refresh(application)

    logger.info("User %s applied to job %s", current_user.id, job_id)
    revalidate_path(f"/jobs/{job_id}", "/dashboard")
    return application


def update_application_status(
    db: Session,
    current_user: Optional[CurrentUser],
    application_id: uuid.UUID,
    status: Union[str, ApplicationStatus]
) -> dict:
    """Job provider moves an application to any status; only the job owner may"""
    current_user = require_role(current_user, UserRole.JOB_PROVIDER)
    new_status = parse_status(status)

    application = (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.id == application_id)
        .first()
    )
    if not application:
        raise UnauthorizedError()
    require_owner(current_user, application.job.user_id)

    previous = application.status
    application.status = new_status
    db.commit()

    logger.info("Application %s moved from %s to %s by user %s",
                application_id, previous.value, new_status.value, current_user.id)
    revalidate_path("/dashboard/applications")
    return {"success": True}


def get_job_seeker_applications(db: Session, current_user: Optional[CurrentUser]) -> List[Application]:
    """All of the seeker's applications with their jobs, newest first"""
    current_user = require_role(current_user, UserRole.JOB_SEEKER)

    return (
        db.query(Application)
        .options(joinedload(Application.job))
        .filter(Application.user_id == current_user.id)
        .order_by(Application.created_at.desc())
        .all()
    )


def provider_applications_query(db: Session, provider_id: uuid.UUID):
    return (
        db.query(Application)
        .join(Job, Application.job_id == Job.id)
        .options(joinedload(Application.job), joinedload(Application.user))
        .filter(Job.user_id == provider_id)
        .order_by(Application.created_at.desc())
    )


def get_job_provider_applications(db: Session, current_user: Optional[CurrentUser]) -> List[Application]:
    """Applications received across all of the provider's jobs, newest first"""
    current_user = require_role(current_user, UserRole.JOB_PROVIDER)
    return provider_applications_query(db, current_user.id).all()
