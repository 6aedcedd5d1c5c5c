import uuid

from jobboard.models import UserRole


JOB_BODY = {
    "title": "Platform Engineer",
    "company": "Acme",
    "location": "Remote",
    "type": "FULL_TIME",
    "description": "Keep the lights on.",
    "requirements": ["Linux", "Python"],
    "responsibilities": ["On-call"],
    "skills": ["Python", "Kubernetes", "Python"],
}


def test_root(client):
    assert client.get("/").json() == {"message": "Job board backend is running!"}


def test_register_login_and_me(client):
    response = client.post("/auth/register", json={
        "name": "Jane", "email": "jane@example.com", "password": "secret123", "role": "JOB_SEEKER",
    })
    assert response.status_code == 201
    assert response.json()["role"] == "JOB_SEEKER"
    assert "hashed_password" not in response.json()

    token = client.post("/auth/login", data={"username": "jane@example.com", "password": "secret123"})
    assert token.status_code == 200
    headers = {"Authorization": f"Bearer {token.json()['access_token']}"}

    me = client.get("/auth/me", headers=headers).json()
    assert me["email"] == "jane@example.com"
    assert me["profile"]["skills"] == []
    assert "company_name" not in me["profile"]


def test_register_duplicate_email(client, make_user):
    make_user(UserRole.JOB_PROVIDER, email="taken@example.com")

    response = client.post("/auth/register", json={
        "name": "Jane", "email": "taken@example.com", "password": "secret123", "role": "JOB_SEEKER",
    })

    assert response.status_code == 400


def test_login_with_wrong_password(client, make_user):
    make_user(email="jane@example.com")

    response = client.post("/auth/login", data={"username": "jane@example.com", "password": "nope"})

    assert response.status_code == 401


def test_protected_route_without_token(client):
    assert client.get("/dashboard/job-seeker").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401


def test_post_job_requires_provider(client, make_user, login):
    make_user(UserRole.JOB_SEEKER, email="seeker@example.com")
    make_user(UserRole.JOB_PROVIDER, email="provider@example.com")

    assert client.post("/jobs", json=JOB_BODY, headers=login("seeker@example.com")).status_code == 403

    response = client.post("/jobs", json=JOB_BODY, headers=login("provider@example.com"))
    assert response.status_code == 201
    assert response.json()["status"] == "ACTIVE"
    assert response.json()["skills"] == ["Python", "Kubernetes"]


def test_list_and_get_jobs(client, provider, make_job):
    remote = make_job(provider, location="Remote")
    make_job(provider, location="Paris, France")

    response = client.get("/jobs", params={"remote": "true", "location": "Paris"})
    assert [job["id"] for job in response.json()] == [str(remote.id)]

    assert client.get(f"/jobs/{remote.id}").json()["location"] == "Remote"
    assert client.get(f"/jobs/{uuid.uuid4()}").status_code == 404


def test_list_jobs_by_type(client, provider, make_job):
    make_job(provider, type="CONTRACT")
    make_job(provider, type="FULL_TIME")

    response = client.get("/jobs", params={"jobType": "CONTRACT"})

    assert [job["type"] for job in response.json()] == ["CONTRACT"]


def test_close_job_via_patch(client, make_user, login, make_job):
    provider = make_user(UserRole.JOB_PROVIDER, email="provider@example.com")[1]
    job = make_job(provider)

    response = client.patch(f"/jobs/{job.id}", json={"status": "CLOSED"}, headers=login("provider@example.com"))

    assert response.status_code == 200
    assert response.json()["status"] == "CLOSED"
    assert client.get("/jobs").json() == []


def test_list_jobs_limit_above_one_hundred(client, provider, make_job):
    for _ in range(3):
        make_job(provider)

    response = client.get("/jobs", params={"limit": 150})

    assert response.status_code == 200
    assert len(response.json()) == 3
    assert client.get("/jobs", params={"limit": 0}).status_code == 422


def test_patch_job_null_clears_salary(client, make_user, login, make_job):
    provider = make_user(UserRole.JOB_PROVIDER, email="provider@example.com")[1]
    job = make_job(provider, salary="$90k")
    headers = login("provider@example.com")

    response = client.patch(f"/jobs/{job.id}", json={"salary": None}, headers=headers)
    assert response.status_code == 200
    assert response.json()["salary"] is None

    response = client.patch(f"/jobs/{job.id}", json={"title": None}, headers=headers)
    assert response.status_code == 400


def test_apply_twice_returns_conflict(client, make_user, login, provider, make_job):
    make_user(UserRole.JOB_SEEKER, email="seeker@example.com")
    job = make_job(provider)
    headers = login("seeker@example.com")
    body = {"job_id": str(job.id), "cover_letter": "Hire me"}

    first = client.post("/applications", json=body, headers=headers)
    second = client.post("/applications", json=body, headers=headers)

    assert first.status_code == 201
    assert first.json()["status"] == "PENDING"
    assert second.status_code == 409
    assert "already applied" in second.json()["detail"]


def test_status_update_flow(client, make_user, login, make_job):
    seeker = make_user(UserRole.JOB_SEEKER, email="seeker@example.com")[1]
    provider = make_user(UserRole.JOB_PROVIDER, email="provider@example.com")[1]
    make_user(UserRole.JOB_PROVIDER, email="rival@example.com")
    job = make_job(provider)
    application = client.post(
        "/applications",
        json={"job_id": str(job.id), "cover_letter": "Hi"},
        headers=login("seeker@example.com"),
    ).json()
    url = f"/applications/{application['id']}/status"

    assert client.patch(url, json={"status": "HIRED"}, headers=login("provider@example.com")).status_code == 422
    assert client.patch(url, json={"status": "ACCEPTED"}, headers=login("rival@example.com")).status_code == 403

    response = client.patch(url, json={"status": "INTERVIEW"}, headers=login("provider@example.com"))
    assert response.json() == {"success": True}

    mine = client.get("/applications/mine", headers=login("seeker@example.com")).json()
    assert mine[0]["status"] == "INTERVIEW"
    assert mine[0]["job"]["id"] == str(job.id)

    received = client.get("/applications/received", headers=login("provider@example.com")).json()
    assert received[0]["user"] == {"id": str(seeker.id), "name": seeker.name, "email": seeker.email}


def test_profile_round_trip(client, make_user, login):
    make_user(UserRole.JOB_SEEKER, email="seeker@example.com")
    headers = login("seeker@example.com")

    response = client.put("/profile", json={"title": "QA", "skills": ["Selenium"]}, headers=headers)
    assert response.json() == {"success": True}

    profile = client.get("/profile", headers=headers).json()
    assert profile["role"] == "JOB_SEEKER"
    assert profile["profile"]["title"] == "QA"
    assert profile["profile"]["skills"] == ["Selenium"]


def test_provider_profile_validation(client, make_user, login):
    make_user(UserRole.JOB_PROVIDER, email="provider@example.com")
    headers = login("provider@example.com")

    assert client.put("/profile", json={"founded_year": 1500}, headers=headers).status_code == 422

    client.put("/profile", json={"company_name": "Acme", "company_size": "11-50"}, headers=headers)
    profile = client.get("/profile", headers=headers).json()
    assert profile["profile"]["company_name"] == "Acme"


def test_dashboards(client, make_user, login, make_job):
    seeker = make_user(UserRole.JOB_SEEKER, email="seeker@example.com")[1]
    provider = make_user(UserRole.JOB_PROVIDER, email="provider@example.com")[1]
    job = make_job(provider)
    client.post("/applications", json={"job_id": str(job.id), "cover_letter": "Hi"},
                headers=login("seeker@example.com"))

    seeker_view = client.get("/dashboard/job-seeker", headers=login("seeker@example.com"))
    assert seeker_view.status_code == 200
    assert seeker_view.json()["stats"]["applications"] == 1
    assert seeker_view.json()["recommended_jobs"] == []

    provider_view = client.get("/dashboard/job-provider", headers=login("provider@example.com"))
    assert provider_view.json()["jobs"][0]["application_count"] == 1
    assert provider_view.json()["stats"]["new_applications"] == 1
    assert provider_view.json()["recent_applications"][0]["user"]["id"] == str(seeker.id)

    assert client.get("/dashboard/job-provider", headers=login("seeker@example.com")).status_code == 403
