# jobboard/seed_data.py
"""
Seed database with demo data
Run: python -m jobboard.seed_data
"""

from sqlalchemy.orm import Session

from jobboard.database import Base, SessionLocal, engine
from jobboard.models import Application, Job, JobProviderProfile, JobSeekerProfile, User, UserRole, JobType
from jobboard.crud import application_crud, job_crud, profile_crud, user_crud
from jobboard.schema.auth_schema import CurrentUser

DEMO_PASSWORD = "password123"

PROVIDERS = [
    {
        "name": "Sarah Ahmed",
        "email": "hr@techcorp.com",
        "profile": {
            "company_name": "TechCorp Ltd",
            "company_description": "Cloud software for logistics teams",
            "industry": "Software Development",
            "location": "Berlin, Germany",
            "website": "https://techcorp.example.com",
            "founded_year": 2012,
            "company_size": "51-200",
        },
        "jobs": [
            {
                "title": "Senior Backend Engineer",
                "location": "Remote",
                "type": JobType.FULL_TIME,
                "salary": "$120k - $150k",
                "description": "Build and operate the APIs behind our routing platform.",
                "requirements": ["5+ years of Python", "Experience with PostgreSQL"],
                "responsibilities": ["Design services", "Review code", "Mentor engineers"],
                "experience": "Senior",
                "education": "B.Sc. in Computer Science or equivalent",
                "industry": "Software Development",
                "skills": ["Python", "FastAPI", "SQL"],
                "featured": True,
            },
            {
                "title": "Frontend Developer",
                "location": "Berlin, Germany",
                "type": JobType.CONTRACT,
                "salary": "$70/hour",
                "description": "Own the customer dashboard written in React.",
                "requirements": ["3+ years of React"],
                "responsibilities": ["Ship features", "Improve accessibility"],
                "experience": "Mid",
                "industry": "Software Development",
                "skills": ["React", "TypeScript"],
            },
        ],
    },
    {
        "name": "Rafiq Hassan",
        "email": "jobs@innovate.io",
        "profile": {
            "company_name": "Innovate Startup",
            "industry": "Fintech",
            "location": "Paris, France",
            "company_size": "1-10",
        },
        "jobs": [
            {
                "title": "Data Analyst Intern",
                "location": "Paris, France",
                "type": JobType.INTERNSHIP,
                "description": "Help us understand how customers use our payment products.",
                "requirements": ["Curiosity", "Basic statistics"],
                "responsibilities": ["Build reports"],
                "experience": "Entry",
                "industry": "Fintech",
                "skills": ["SQL", "Excel"],
            },
        ],
    },
]

SEEKERS = [
    {
        "name": "John Developer",
        "email": "john.dev@example.com",
        "profile": {
            "title": "Backend Developer",
            "bio": "Backend developer with 3+ years in Python and FastAPI.",
            "location": "Lisbon, Portugal",
            "skills": ["Python", "FastAPI", "PostgreSQL", "Docker"],
            "github": "https://github.com/johndev",
        },
        "apply_to": ["Senior Backend Engineer"],
    },
    {
        "name": "Sarah Designer",
        "email": "sarah.designer@example.com",
        "profile": {
            "title": "UI Engineer",
            "location": "Berlin, Germany",
            "skills": ["React", "Figma"],
        },
        "apply_to": [],
    },
]


def _identity(user: User) -> CurrentUser:
    return CurrentUser.model_validate(user)


def clear_database(db: Session):
    # Delete in reverse dependency order
    db.query(Application).delete()
    db.query(Job).delete()
    db.query(JobSeekerProfile).delete()
    db.query(JobProviderProfile).delete()
    db.query(User).delete()
    db.commit()


def seed_database(db: Session) -> dict:
    print("🗑️  Clearing existing data...")
    clear_database(db)

    jobs_by_title = {}

    print("🏢 Creating job providers...")
    for provider_data in PROVIDERS:
        user = user_crud.register_user(
            db, provider_data["name"], provider_data["email"], DEMO_PASSWORD, UserRole.JOB_PROVIDER
        )
        provider = _identity(user)
        profile_crud.update_profile(db, provider, provider_data["profile"])
        for job_data in provider_data["jobs"]:
            job = job_crud.create_job(
                db, provider, company=provider_data["profile"]["company_name"], **job_data
            )
            jobs_by_title[job.title] = job
        print(f"✅ Provider: {provider_data['email']} / {DEMO_PASSWORD}")

    print("\n👤 Creating job seekers...")
    applications = 0
    for seeker_data in SEEKERS:
        user = user_crud.register_user(
            db, seeker_data["name"], seeker_data["email"], DEMO_PASSWORD, UserRole.JOB_SEEKER
        )
        seeker = _identity(user)
        profile_crud.update_profile(db, seeker, seeker_data["profile"])
        for title in seeker_data["apply_to"]:
            application_crud.apply_for_job(
                db, seeker, jobs_by_title[title].id, f"I would love to join as {title}."
            )
            applications += 1
        print(f"✅ Seeker: {seeker_data['email']} / {DEMO_PASSWORD}")

    summary = {
        "providers": len(PROVIDERS),
        "seekers": len(SEEKERS),
        "jobs": len(jobs_by_title),
        "applications": applications,
    }
    print(f"\n🎉 Seeding complete: {summary}")
    return summary


if __name__ == "__main__":
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_database(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
