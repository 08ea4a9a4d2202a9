"""
Storage selection.

The backend is chosen once, at process start, and then injected
everywhere. With STORAGE_BACKEND=auto the order is PostgreSQL, MongoDB,
then the flat JSON file; the database probes use short timeouts so a
missing server only delays startup by a couple of seconds.
"""

from typing import Optional

from hiresense.core.config import Settings, get_settings
from hiresense.core.log import get_logger
from hiresense.services.file_repository import JsonFileRepository
from hiresense.services.repository import Repository
from hiresense.services.seed import SAMPLE_JOBS

logger = get_logger(__name__)

BACKENDS = ("auto", "postgres", "mongodb", "file")

_repository: Optional[Repository] = None


def _postgres_repository(settings: Settings) -> Repository:
    from hiresense.db.postgres import get_engine
    from hiresense.services.sql_repository import SqlRepository
    return SqlRepository(get_engine())


def _mongo_repository(settings: Settings) -> Repository:
    from hiresense.db.mongodb import get_mongo_db
    from hiresense.services.mongo_repository import MongoRepository
    return MongoRepository(get_mongo_db())


def _file_repository(settings: Settings) -> Repository:
    return JsonFileRepository(settings.data_file)


_FACTORIES = {
    "postgres": _postgres_repository,
    "mongodb": _mongo_repository,
    "file": _file_repository,
}


def select_repository(settings: Optional[Settings] = None) -> Repository:
    """Build, initialise and seed the configured backend."""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()
    if backend not in BACKENDS:
        raise ValueError(f"Unknown STORAGE_BACKEND '{backend}'. Expected one of: {', '.join(BACKENDS)}")

    if backend == "auto":
        repository = None
        for candidate in ("postgres", "mongodb"):
            logger.info("Probing %s...", candidate)
            try:
                probe = _FACTORIES[candidate](settings)
            except Exception as e:
                logger.warning("%s unavailable: %s", candidate, e)
                continue
            if probe.ping():
                repository = probe
                break
        if repository is None:
            logger.warning("No database reachable, using local file %s", settings.data_file)
            repository = _file_repository(settings)
    else:
        repository = _FACTORIES[backend](settings)

    repository.init()
    repository.seed(SAMPLE_JOBS)
    logger.info("Database system initialized. Mode: %s", repository.name.upper())
    return repository


def get_repository() -> Repository:
    """Process-wide repository (selected on first use)."""
    global _repository
    if _repository is None:
        _repository = select_repository()
    return _repository


def reset_repository() -> None:
    global _repository
    _repository = None
