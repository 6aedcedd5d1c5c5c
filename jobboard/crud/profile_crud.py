import logging
from typing import Optional

from sqlalchemy.orm import Session

from jobboard.exceptions import UnauthorizedError
from jobboard.models.user import User, UserRole
from jobboard.models.job_seeker import JobSeekerProfile
from jobboard.models.job_provider import JobProviderProfile
from jobboard.schema.auth_schema import CurrentUser
from jobboard.utils.guards import require_session
from jobboard.utils.revalidation import revalidate_path

logger = logging.getLogger(__name__)

JOB_SEEKER_FIELDS = (
    "title", "bio", "location", "skills", "experience", "education",
    "resume", "linkedin", "github", "website",
)

JOB_PROVIDER_FIELDS = (
    "company_name", "company_description", "industry", "location",
    "website", "linkedin", "founded_year", "company_size",
)


def update_profile(
    db: Session,
    current_user: Optional[CurrentUser],
    data: dict,
    role: Optional[UserRole] = None
) -> dict:
    """
    Save the caller's name and role-specific profile.

    The profile row is created on first save if it does not exist yet.
    Only keys present in ``data`` are written. A role other than the
    caller's own is rejected, so a user never owns a profile of the
    other shape.
    """
    current_user = require_session(current_user)
    role = UserRole(role) if role is not None else current_user.role
    if role != current_user.role:
        logger.warning("User %s tried to save a %s profile", current_user.id, role.value)
        raise UnauthorizedError()

    user = db.query(User).filter(User.id == current_user.id).first()
    if not user:
        raise UnauthorizedError()

    if data.get("name"):
        user.name = data["name"]

    if role == UserRole.JOB_SEEKER:
        model, fields = JobSeekerProfile, JOB_SEEKER_FIELDS
    else:
        model, fields = JobProviderProfile, JOB_PROVIDER_FIELDS

    profile = db.query(model).filter(model.user_id == user.id).first()
    if profile is None:
        profile = model(user_id=user.id)
        db.add(profile)

    for field in fields:
        if field in data:
            value = data[field]
            if field == "skills" and value is None:
                value = []
            setattr(profile, field, value)

    db.commit()
    logger.info("Saved %s profile for user %s", role.value, user.id)

    revalidate_path("/dashboard/profile")
    return {"success": True}
