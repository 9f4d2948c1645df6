"""
MongoDB connection provider.

One DatabaseProvider lives on app.state for the lifetime of the process.
The first call to get_database() connects; every later or concurrent call
gets the same handle, or the same exception if connecting failed.
"""
import logging
import threading
from typing import Callable, Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database

from config import Settings

logger = logging.getLogger(__name__)

PROJECTS_COLLECTION = "projects"
FORMS_COLLECTION = "forms"


class DatabaseProvider:
    def __init__(self, settings: Settings, client_factory: Callable[..., MongoClient] = MongoClient):
        self.settings = settings
        self._client_factory = client_factory
        self._lock = threading.Lock()
        self._attempted = False
        self._client: Optional[MongoClient] = None
        self._db: Optional[Database] = None
        self._error: Optional[BaseException] = None

    def get_database(self) -> Database:
        with self._lock:
            if not self._attempted:
                self._attempted = True
                self._connect()
        if self._error is not None:
            raise self._error
        return self._db

    def _connect(self) -> None:
        try:
            client = self._client_factory(self.settings.mongodb_uri)
            client.admin.command("ping")
        except Exception as e:
            logger.error("Could not connect to MongoDB: %s", e)
            self._error = e
            return
        self._client = client
        self._db = client[self.settings.database_name]
        logger.info("Connected to MongoDB database %r", self.settings.database_name)

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
                self._db = None
                self._error = RuntimeError("MongoDB client is closed")


def get_provider(request: Request) -> DatabaseProvider:
    """FastAPI dependency returning the process-wide provider."""
    return request.app.state.db_provider
