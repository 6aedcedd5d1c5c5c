import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.exceptions import EmailAlreadyRegisteredError
from jobboard.models.user import User, UserRole
from jobboard.models.job_seeker import JobSeekerProfile
from jobboard.models.job_provider import JobProviderProfile
from jobboard.schema.auth_schema import CurrentUser
from jobboard.utils.security import hash_password, verify_password

logger = logging.getLogger(__name__)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def register_user(db: Session, name: str, email: str, password: str, role: UserRole) -> User:
    """Create the user together with the (empty) profile matching its role"""
    role = UserRole(role)
    if get_user_by_email(db, email):
        raise EmailAlreadyRegisteredError(email)

    user = User(name=name, email=email, hashed_password=hash_password(password), role=role)
    if role == UserRole.JOB_SEEKER:
        user.job_seeker_profile = JobSeekerProfile()
    else:
        user.job_provider_profile = JobProviderProfile()

    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        if get_user_by_email(db, email):
            raise EmailAlreadyRegisteredError(email)
        raise
    db.refresh(user)

    logger.info("Registered %s user %s", role.value, user.id)
    return user


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    user = get_user_by_email(db, email)
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def get_user_profile(db: Session, current_user: Optional[CurrentUser]) -> Optional[User]:
    """User with its role-specific profile loaded, or None when anonymous"""
    if current_user is None:
        return None

    profile_attr = (
        User.job_seeker_profile if current_user.role == UserRole.JOB_SEEKER
        else User.job_provider_profile
    )
    return (
        db.query(User)
        .options(joinedload(profile_attr))
        .filter(User.id == current_user.id)
        .first()
    )
