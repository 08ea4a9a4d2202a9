import inspect

import pytest

from hiresense.api.routes import ai_routes

RESUME = "Python developer with 6 years of experience in FastAPI and PostgreSQL."


def test_match(client, fake_llm):
    fake_llm.responses.append({"score": 82, "missingSkills": ["Kubernetes"], "analysis": "Strong backend fit."})

    response = client.post("/api/ai/match", json={"resumeText": RESUME, "jobDescription": "Backend role"})

    assert response.status_code == 200
    assert response.json() == {"score": 82, "missingSkills": ["Kubernetes"], "analysis": "Strong backend fit."}
    assert "Backend role" in fake_llm.calls[0][1]


def test_match_falls_back_when_ai_fails(client, fake_llm):
    fake_llm.responses.append(RuntimeError("connection refused"))

    response = client.post("/api/ai/match", json={"resumeText": RESUME, "jobDescription": "Backend role"})

    assert response.status_code == 200
    assert response.json() == {
        "score": 0,
        "missingSkills": ["Error connecting to AI service"],
        "analysis": "Could not perform analysis. Please check API Key.",
    }


def test_match_requires_both_texts(client):
    response = client.post("/api/ai/match", json={"resumeText": RESUME})
    assert response.status_code == 422


def test_review(client, fake_llm):
    fake_llm.responses.append({
        "rating": 7,
        "summary": "Solid backend profile.",
        "strengths": ["Python", "APIs", "Databases"],
        "improvements": ["Metrics", "Leadership", "Testing"],
    })

    response = client.post("/api/ai/review", json={"resumeText": RESUME})

    assert response.status_code == 200
    assert response.json()["rating"] == 7
    assert response.json()["strengths"] == ["Python", "APIs", "Databases"]


def test_review_falls_back_on_malformed_answer(client, fake_llm):
    fake_llm.responses.append({"verdict": "good"})

    response = client.post("/api/ai/review", json={"resumeText": RESUME})

    assert response.status_code == 200
    assert response.json() == {
        "rating": 5,
        "summary": "Could not analyze resume.",
        "strengths": ["N/A"],
        "improvements": ["Check API connection"],
    }


def test_recommendations_return_known_jobs(client, fake_llm):
    fake_llm.responses.append({"jobIds": ["j2", "made-up", "j4"]})

    response = client.post("/api/ai/recommendations", json={"resumeText": RESUME})

    assert response.status_code == 200
    body = response.json()
    assert body["jobIds"] == ["j2", "j4"]
    assert [j["title"] for j in body["jobs"]] == ["Full Stack Developer", "Backend Engineer"]


def test_recommendations_empty_when_ai_fails(client, fake_llm):
    fake_llm.responses.append(ValueError("bad json"))

    response = client.post("/api/ai/recommendations", json={"resumeText": RESUME, "limit": 2})

    assert response.status_code == 200
    assert response.json() == {"jobIds": [], "jobs": []}


def test_match_out_of_range_score_falls_back(client, fake_llm):
    fake_llm.responses.append({"score": 150, "missingSkills": [], "analysis": "Perfect."})

    response = client.post("/api/ai/match", json={"resumeText": RESUME, "jobDescription": "Backend role"})

    assert response.status_code == 200
    assert response.json()["score"] == 0
    assert response.json()["missingSkills"] == ["Error connecting to AI service"]


@pytest.mark.parametrize("handler", [ai_routes.match, ai_routes.review, ai_routes.recommendations])
def test_ai_handlers_run_in_threadpool(handler):
    assert not inspect.iscoroutinefunction(handler)
