"""Client for the HireSense API with a local JSON fallback."""

from hiresense.client.api import JobBoardClient
from hiresense.client.session import SessionStore
from hiresense.client.stores import DataStore, LocalStore, RemoteStore, select_store

__all__ = ["JobBoardClient", "SessionStore", "DataStore", "LocalStore", "RemoteStore", "select_store"]
