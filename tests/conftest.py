import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import timedelta
from itertools import count

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard import models  # noqa: F401
from jobboard.crud import job_crud, user_crud
from jobboard.database import Base, get_db, utcnow
from jobboard.main import app
from jobboard.models.job import JobType
from jobboard.models.user import UserRole
from jobboard.schema.auth_schema import CurrentUser


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


_emails = count(1)


@pytest.fixture
def make_user(db):
    """Register a user and return (User, CurrentUser)"""
    def _make_user(role=UserRole.JOB_SEEKER, name=None, email=None, password="secret123"):
        n = next(_emails)
        user = user_crud.register_user(
            db,
            name=name or f"User {n}",
            email=email or f"user{n}@example.com",
            password=password,
            role=role,
        )
        return user, CurrentUser.model_validate(user)
    return _make_user


@pytest.fixture
def seeker(make_user):
    return make_user(UserRole.JOB_SEEKER, name="Jane Seeker")[1]


@pytest.fixture
def provider(make_user):
    return make_user(UserRole.JOB_PROVIDER, name="Paul Provider")[1]


@pytest.fixture
def make_job(db):
    """Post a job as the given provider; age_days pushes created_at into the past"""
    def _make_job(provider, age_days=0, **overrides):
        data = {
            "title": "Software Engineer",
            "company": "Acme",
            "location": "Berlin, Germany",
            "type": JobType.FULL_TIME,
            "description": "Build things.",
            "requirements": ["Python"],
            "responsibilities": ["Write code"],
            "skills": [],
        }
        data.update(overrides)
        status = data.pop("status", None)
        job = job_crud.create_job(db, provider, **data)
        job.created_at = utcnow() - timedelta(days=age_days)
        if status is not None:
            job.status = status
        db.commit()
        db.refresh(job)
        return job
    return _make_job


@pytest.fixture
def login(client):
    """Bearer headers for an already registered user"""
    def _login(email, password="secret123"):
        response = client.post("/auth/login", data={"username": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}
    return _login
