from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from hiresense.api.deps import get_matcher
from hiresense.main import app
from hiresense.services.file_repository import JsonFileRepository
from hiresense.services.matching_service import MatchingService
from hiresense.services.seed import SAMPLE_JOBS, sample_users
from hiresense.services.storage import get_repository


class FakeLLM:
    """Stands in for LLMClient: returns queued answers or raises them."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def complete_json(self, system_prompt, user_content, max_tokens=1000):
        self.calls.append((system_prompt, user_content))
        if not self.responses:
            raise RuntimeError("no response queued")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def fake_openai(content):
    """Minimal object shaped like openai.OpenAI returning `content`."""
    completion = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
    create = lambda **kwargs: completion  # noqa: E731
    return SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))


@pytest.fixture
def repository(tmp_path):
    repo = JsonFileRepository(tmp_path / "database.json")
    repo.init()
    repo.seed(SAMPLE_JOBS, sample_users())
    return repo


@pytest.fixture
def fake_llm():
    return FakeLLM()


@pytest.fixture
def client(repository, fake_llm):
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_matcher] = lambda: MatchingService(ai_client=fake_llm)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeker(client):
    response = client.post("/api/auth/register", json={
        "name": "Jamie Rivera",
        "email": "jamie@acme.io",
        "password": "secret-pass",
    })
    assert response.status_code == 201
    return response.json()
