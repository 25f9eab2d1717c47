"""
MongoDB access for Recruit Match.

One DatabaseManager owns a PyMongo client for synchronous reads and a Motor
client for the async matching path. Both are created on first use.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from recruit_match.utils.config import DatabaseSettings, get_settings
from recruit_match.utils.logger import get_logger

logger = get_logger(__name__)

CANDIDATES_COLLECTION = "candidates"
JOBS_COLLECTION = "jobs"
CANDIDATE_COMPETENCIES_COLLECTION = "candidate_competencies"
JOB_COMPETENCIES_COLLECTION = "job_competencies"

CLIENT_OPTIONS: dict[str, Any] = {
    "serverSelectionTimeoutMS": 5000,
    "connectTimeoutMS": 5000,
    "maxPoolSize": 50,
}

# collection -> (key spec, unique)
READ_INDEXES: dict[str, list[tuple[list[tuple[str, int]], bool]]] = {
    CANDIDATES_COLLECTION: [([("status", ASCENDING)], False)],
    JOBS_COLLECTION: [([("status", ASCENDING)], False)],
    CANDIDATE_COMPETENCIES_COLLECTION: [
        ([("candidate_id", ASCENDING), ("competency_id", ASCENDING)], True),
    ],
    JOB_COMPETENCIES_COLLECTION: [
        ([("job_id", ASCENDING), ("competency_id", ASCENDING)], True),
    ],
}

_FORBIDDEN_HOST_CHARS = frozenset(";&|$`")


def build_mongo_uri(db_settings: DatabaseSettings) -> str:
    """
    Build a mongodb:// URI from settings.

    Credentials are URL-encoded and only used when both are set.

    Raises:
        ValueError: If the host is empty or contains shell metacharacters.
    """
    host = db_settings.host.strip()
    if not host or _FORBIDDEN_HOST_CHARS.intersection(host):
        raise ValueError(f"Invalid database host: {host!r}")

    credentials = ""
    if db_settings.username and db_settings.password:
        credentials = f"{quote_plus(db_settings.username)}:{quote_plus(db_settings.password)}@"

    return f"mongodb://{credentials}{host}:{db_settings.port}"


class DatabaseManager:
    """Lazily connected MongoDB clients for one database."""

    def __init__(self, db_settings: Optional[DatabaseSettings] = None) -> None:
        self._settings = db_settings or get_settings().database
        self._uri = build_mongo_uri(self._settings)
        self._sync_client: Optional[MongoClient] = None
        self._async_client: Optional[AsyncIOMotorClient] = None

    @property
    def database_name(self) -> str:
        return self._settings.name

    # -------------------------------------------------------------------------
    # Synchronous Client
    # -------------------------------------------------------------------------

    def get_sync_database(self) -> Database:
        if self._sync_client is None:
            logger.info(f"Connecting to MongoDB database {self.database_name!r}")
            self._sync_client = MongoClient(self._uri, **CLIENT_OPTIONS)
        return self._sync_client[self.database_name]

    def get_sync_collection(self, collection_name: str) -> Any:
        return self.get_sync_database()[collection_name]

    def check_sync_connection(self) -> bool:
        """Ping the server; a failed ping drops the cached client."""
        try:
            self.get_sync_database().client.admin.command("ping")
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"MongoDB ping failed: {e}")
            self._sync_client = None
            return False
        return True

    # -------------------------------------------------------------------------
    # Asynchronous Client
    # -------------------------------------------------------------------------

    def get_async_database(self) -> AsyncIOMotorDatabase:
        if self._async_client is None:
            logger.info(f"Connecting to MongoDB database {self.database_name!r} (async)")
            self._async_client = AsyncIOMotorClient(self._uri, **CLIENT_OPTIONS)
        return self._async_client[self.database_name]

    def get_async_collection(self, collection_name: str) -> Any:
        return self.get_async_database()[collection_name]

    # -------------------------------------------------------------------------
    # Maintenance
    # -------------------------------------------------------------------------

    def ensure_indexes(self) -> None:
        """Create the status and competency-link indexes used by the reads."""
        for collection_name, indexes in READ_INDEXES.items():
            collection = self.get_sync_collection(collection_name)
            for keys, unique in indexes:
                collection.create_index(keys, unique=unique)
        logger.info(f"Indexes ensured on {len(READ_INDEXES)} collections")

    def close_all(self) -> None:
        for client in (self._sync_client, self._async_client):
            if client is not None:
                client.close()
        self._sync_client = None
        self._async_client = None


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager
