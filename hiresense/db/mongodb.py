"""
MongoDB Connection Utility

MongoDB is one of the interchangeable stores for users, jobs and
applications. Each record is one self-contained document keyed by its
string id, so no joins are needed.
"""
from typing import Optional

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from hiresense.core.config import get_settings
from hiresense.core.log import get_logger

logger = get_logger(__name__)

# Global client (connection pooling handled internally by pymongo)
_client: Optional[MongoClient] = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        settings = get_settings()
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms
        )
    return _client


def get_mongo_db() -> Database:
    """Get the configured database"""
    return get_mongo_client()[get_settings().mongodb_db]


def test_mongo_connection(client: Optional[MongoClient] = None) -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        # ping command checks connection
        (client or get_mongo_client()).admin.command("ping")
        return True
    except Exception as e:
        logger.warning("MongoDB connection failed: %s", e)
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "jobs": "jobs",
    "applications": "applications"
}


def init_mongo_indexes(db: Database) -> None:
    """
    Create indexes. Safe to call on every startup.
    """
    db[COLLECTIONS["users"]].create_index("id", unique=True)
    db[COLLECTIONS["users"]].create_index("email", unique=True)

    db[COLLECTIONS["jobs"]].create_index("id", unique=True)
    db[COLLECTIONS["jobs"]].create_index([("postedDate", -1)])

    db[COLLECTIONS["applications"]].create_index("id", unique=True)
    db[COLLECTIONS["applications"]].create_index([
        ("jobId", ASCENDING),
        ("userId", ASCENDING)
    ])

    logger.info("MongoDB indexes created")
