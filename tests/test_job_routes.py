NEW_JOB = {
    "title": "Data Engineer",
    "company": "Acme",
    "location": "Berlin",
    "salary": "$100k",
    "type": "Full-time",
    "description": "Build pipelines.",
    "requirements": ["Python", "Spark"],
    "recruiterId": "r1",
}


def test_list_seeded_jobs_newest_first(client):
    jobs = client.get("/api/jobs").json()

    assert [j["id"] for j in jobs] == ["j1", "j2", "j4", "j3"]


def test_get_job(client):
    response = client.get("/api/jobs/j2")

    assert response.status_code == 200
    assert response.json()["company"] == "InnovateAI"


def test_get_unknown_job(client):
    response = client.get("/api/jobs/nope")

    assert response.status_code == 404
    assert response.json() == {"detail": "Job not found"}


def test_create_job(client):
    response = client.post("/api/jobs", json=NEW_JOB)

    assert response.status_code == 201
    job = response.json()
    assert job["id"].startswith("j")
    assert job["postedDate"]
    assert job["requirements"] == ["Python", "Spark"]

    jobs = client.get("/api/jobs").json()
    assert jobs[0]["id"] == job["id"]
    assert len(jobs) == 5


def test_create_job_requires_title(client):
    response = client.post("/api/jobs", json={**NEW_JOB, "title": ""})
    assert response.status_code == 422


def test_create_job_rejects_unknown_type(client):
    response = client.post("/api/jobs", json={**NEW_JOB, "type": "Internship"})
    assert response.status_code == 422
