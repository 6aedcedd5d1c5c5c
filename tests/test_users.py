from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from pydantic import TypeAdapter

from jobboard.crud import user_crud
from jobboard.exceptions import EmailAlreadyRegisteredError
from jobboard.models import JobProviderProfile, JobSeekerProfile, User, UserRole
from jobboard.schema.user_schema import JobProviderUserResponse, JobSeekerUserResponse, UserProfileResponse
from jobboard.utils import security


def test_register_job_seeker_creates_only_seeker_profile(db):
    user = user_crud.register_user(db, "Jane", "jane@example.com", "secret123", UserRole.JOB_SEEKER)

    assert db.query(User).count() == 1
    assert db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == user.id).count() == 1
    assert db.query(JobProviderProfile).count() == 0
    assert user.profile is user.job_seeker_profile
    assert user.profile.skills == []


def test_register_job_provider_creates_only_provider_profile(db):
    user = user_crud.register_user(db, "Paul", "paul@example.com", "secret123", "JOB_PROVIDER")

    assert user.role == UserRole.JOB_PROVIDER
    assert db.query(JobProviderProfile).count() == 1
    assert db.query(JobSeekerProfile).count() == 0
    assert user.profile is user.job_provider_profile


def test_password_is_hashed(db):
    user = user_crud.register_user(db, "Jane", "jane@example.com", "secret123", UserRole.JOB_SEEKER)
    assert user.hashed_password != "secret123"


def test_duplicate_email_is_rejected(db):
    user_crud.register_user(db, "Jane", "jane@example.com", "secret123", UserRole.JOB_SEEKER)

    with pytest.raises(EmailAlreadyRegisteredError):
        user_crud.register_user(db, "Other Jane", "jane@example.com", "secret456", UserRole.JOB_PROVIDER)

    assert db.query(User).count() == 1
    assert db.query(JobProviderProfile).count() == 0


def test_authenticate_user(db):
    user_crud.register_user(db, "Jane", "jane@example.com", "secret123", UserRole.JOB_SEEKER)

    assert user_crud.authenticate_user(db, "jane@example.com", "secret123") is not None
    assert user_crud.authenticate_user(db, "jane@example.com", "wrong") is None
    assert user_crud.authenticate_user(db, "nobody@example.com", "secret123") is None


def test_get_user_profile_anonymous(db):
    assert user_crud.get_user_profile(db, None) is None


def test_user_profile_is_tagged_by_role(db, seeker, provider):
    adapter = TypeAdapter(UserProfileResponse)

    seeker_view = adapter.validate_python(user_crud.get_user_profile(db, seeker), from_attributes=True)
    provider_view = adapter.validate_python(user_crud.get_user_profile(db, provider), from_attributes=True)

    assert isinstance(seeker_view, JobSeekerUserResponse)
    assert seeker_view.profile.skills == []
    assert isinstance(provider_view, JobProviderUserResponse)
    assert provider_view.profile.company_name is None


def test_access_token_expires_after_configured_lifetime():
    before = datetime.now(timezone.utc)
    token = security.create_access_token({"sub": "user-id"})

    claims = jwt.decode(token, security.SECRET_KEY, algorithms=[security.ALGORITHM])
    lifetime = datetime.fromtimestamp(claims["exp"], timezone.utc) - before

    assert claims["sub"] == "user-id"
    assert abs(lifetime - timedelta(minutes=security.ACCESS_TOKEN_EXPIRE_MINUTES)) < timedelta(seconds=5)
    assert security.decode_access_token(token) == "user-id"
