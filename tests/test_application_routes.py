import pytest


def apply(client, job_id, user_id, score=None):
    body = {"jobId": job_id, "userId": user_id}
    if score is not None:
        body["matchScore"] = score
    return client.post("/api/applications", json=body)


def register(client, name, email, resume):
    user = client.post("/api/auth/register", json={"name": name, "email": email, "password": "pw"}).json()
    client.patch(f"/api/users/{user['id']}", json={"resumeText": resume})
    return user


def test_create_application(client, seeker):
    response = apply(client, "j1", seeker["id"], score=72)

    assert response.status_code == 201
    application = response.json()
    assert application["id"].startswith("a")
    assert application["status"] == "Applied"
    assert application["matchScore"] == 72
    assert application["appliedDate"]


def test_second_application_rejected(client, seeker):
    assert apply(client, "j1", seeker["id"]).status_code == 201

    response = apply(client, "j1", seeker["id"])

    assert response.status_code == 400
    assert response.json() == {"detail": "Already applied"}
    assert len(client.get("/api/applications").json()) == 1


def test_same_user_can_apply_to_other_jobs(client, seeker):
    assert apply(client, "j1", seeker["id"]).status_code == 201
    assert apply(client, "j2", seeker["id"]).status_code == 201


def test_filter_by_job_and_user(client, seeker):
    apply(client, "j1", seeker["id"])
    apply(client, "j2", seeker["id"])
    apply(client, "j1", "u1")

    assert len(client.get("/api/applications", params={"jobId": "j1"}).json()) == 2
    assert len(client.get("/api/applications", params={"userId": seeker["id"]}).json()) == 2
    assert len(client.get("/api/applications", params={"jobId": "j1", "userId": "u1"}).json()) == 1


def test_status_changes_only_through_update(client, seeker):
    application = apply(client, "j1", seeker["id"]).json()

    apply(client, "j2", seeker["id"])
    client.patch(f"/api/users/{seeker['id']}", json={"bio": "changed"})
    listed = client.get("/api/applications", params={"userId": seeker["id"]}).json()
    assert {a["status"] for a in listed} == {"Applied"}

    response = client.patch(f"/api/applications/{application['id']}", json={"status": "Interview"})
    assert response.status_code == 200
    assert response.json()["status"] == "Interview"

    statuses = {a["id"]: a["status"] for a in client.get("/api/applications").json()}
    assert statuses[application["id"]] == "Interview"
    assert sorted(statuses.values()) == ["Applied", "Interview"]


def test_update_rejects_unknown_status(client, seeker):
    application = apply(client, "j1", seeker["id"]).json()

    response = client.patch(f"/api/applications/{application['id']}", json={"status": "Ghosted"})
    assert response.status_code == 422


def test_update_unknown_application(client):
    response = client.patch("/api/applications/a-missing", json={"status": "Rejected"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Application not found"}


def test_match_score_out_of_range(client, seeker):
    assert apply(client, "j1", seeker["id"], score=150).status_code == 422


@pytest.mark.parametrize("sort_by, expected", [
    ("overall", ["junior", "senior", "mid"]),
    ("experience", ["senior", "mid", "junior"]),
    ("skills", ["mid", "senior", "junior"]),
])
def test_ranked_listing(client, sort_by, expected):
    users = {
        "junior": register(client, "Junior", "junior@acme.io", "1 year of experience. HTML."),
        "senior": register(client, "Senior", "senior@acme.io", "12+ yrs building React apps."),
        "mid": register(client, "Mid", "mid@acme.io", "4 years. React, TypeScript, Tailwind CSS, CI/CD."),
    }
    scores = {"junior": 90, "senior": 60, "mid": 40}
    for key, user in users.items():
        apply(client, "j1", user["id"], score=scores[key])
    names = {u["id"]: key for key, u in users.items()}

    response = client.get("/api/applications", params={"jobId": "j1", "sortBy": sort_by})

    assert response.status_code == 200
    assert [names[a["userId"]] for a in response.json()] == expected


def test_unknown_sort_mode(client):
    assert client.get("/api/applications", params={"sortBy": "age"}).status_code == 422
