import pytest

from jobboard.crud import profile_crud
from jobboard.exceptions import UnauthorizedError
from jobboard.models import JobProviderProfile, JobSeekerProfile, User, UserRole
from jobboard.utils import revalidation


def test_update_seeker_profile(db, seeker):
    result = profile_crud.update_profile(db, seeker, {
        "name": "Jane Q. Seeker",
        "title": "Frontend Developer",
        "skills": ["React", "SQL"],
        "github": "https://github.com/jane",
    })

    assert result == {"success": True}
    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == seeker.id).one()
    assert profile.title == "Frontend Developer"
    assert profile.skills == ["React", "SQL"]
    assert db.get(User, seeker.id).name == "Jane Q. Seeker"


def test_partial_update_keeps_other_fields(db, seeker):
    profile_crud.update_profile(db, seeker, {"title": "Designer", "location": "Lisbon"})
    profile_crud.update_profile(db, seeker, {"location": "Porto"})

    profile = db.query(JobSeekerProfile).filter(JobSeekerProfile.user_id == seeker.id).one()
    assert profile.title == "Designer"
    assert profile.location == "Porto"


def test_profile_created_on_first_save(db, provider):
    db.delete(db.query(JobProviderProfile).filter(JobProviderProfile.user_id == provider.id).one())
    db.commit()
    assert db.query(JobProviderProfile).count() == 0

    profile_crud.update_profile(db, provider, {"company_name": "Acme", "founded_year": 1999})

    profile = db.query(JobProviderProfile).filter(JobProviderProfile.user_id == provider.id).one()
    assert profile.company_name == "Acme"
    assert profile.founded_year == 1999


def test_cannot_save_profile_of_other_role(db, seeker):
    with pytest.raises(UnauthorizedError):
        profile_crud.update_profile(db, seeker, {"company_name": "Acme"}, UserRole.JOB_PROVIDER)

    assert db.query(JobProviderProfile).count() == 0


def test_anonymous_cannot_save_profile(db):
    with pytest.raises(UnauthorizedError):
        profile_crud.update_profile(db, None, {"title": "x"})


def test_profile_save_revalidates_profile_view(db, seeker):
    seen = []
    revalidation.subscribe(seen.append)
    try:
        profile_crud.update_profile(db, seeker, {"bio": "Hello"})
    finally:
        revalidation.unsubscribe(seen.append)

    assert seen == ["/dashboard/profile"]
