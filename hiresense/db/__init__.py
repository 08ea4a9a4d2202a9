"""
Database module - SQL and MongoDB connections.
"""
from hiresense.db.postgres import build_engine, get_engine, test_postgres_connection
from hiresense.db.mongodb import get_mongo_db, test_mongo_connection

__all__ = [
    "build_engine",
    "get_engine",
    "test_postgres_connection",
    "get_mongo_db",
    "test_mongo_connection"
]
