import pytest

from hiresense.core.config import Settings
from hiresense.services import storage
from hiresense.services.file_repository import JsonFileRepository


class UnreachableRepository(JsonFileRepository):
    def ping(self) -> bool:
        return False


def test_file_backend_is_seeded(tmp_path):
    settings = Settings(storage_backend="file", data_file=str(tmp_path / "db.json"))

    repository = storage.select_repository(settings)

    assert repository.name == "local_file"
    assert repository.count_jobs() == 4
    assert repository.list_users() == []


def test_unknown_backend(tmp_path):
    with pytest.raises(ValueError):
        storage.select_repository(Settings(storage_backend="redis"))


def test_auto_falls_back_to_file(tmp_path, monkeypatch):
    def broken_postgres(settings):
        raise RuntimeError("driver missing")

    monkeypatch.setitem(storage._FACTORIES, "postgres", broken_postgres)
    monkeypatch.setitem(storage._FACTORIES, "mongodb", lambda s: UnreachableRepository(tmp_path / "mongo.json"))
    settings = Settings(storage_backend="auto", data_file=str(tmp_path / "db.json"))

    repository = storage.select_repository(settings)

    assert isinstance(repository, JsonFileRepository)
    assert not isinstance(repository, UnreachableRepository)
    assert repository.path == tmp_path / "db.json"


def test_auto_prefers_first_reachable_backend(tmp_path, monkeypatch):
    picked = JsonFileRepository(tmp_path / "pg.json")
    monkeypatch.setitem(storage._FACTORIES, "postgres", lambda s: picked)

    repository = storage.select_repository(Settings(storage_backend="auto", data_file=str(tmp_path / "db.json")))

    assert repository is picked
    assert repository.count_jobs() == 4


def test_repository_selected_once(tmp_path, monkeypatch):
    calls = []

    def select(settings=None):
        calls.append(1)
        return JsonFileRepository(tmp_path / "db.json")

    monkeypatch.setattr(storage, "select_repository", select)
    storage.reset_repository()
    try:
        first = storage.get_repository()
        assert storage.get_repository() is first
        assert len(calls) == 1
    finally:
        storage.reset_repository()
