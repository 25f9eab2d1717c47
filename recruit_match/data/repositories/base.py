"""
Base repository class providing common read operations.

All entity-specific repositories inherit from this base class.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.collection import Collection

from recruit_match.data.database import DatabaseManager, get_database_manager
from recruit_match.data.models.base import BaseDocument, to_query_id
from recruit_match.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing read-only database access.

    Implements both synchronous and asynchronous lookups.
    Subclasses must define the collection name and model class.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        pass

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        """Initialize repository with database connection."""
        self._db_manager = db_manager or get_database_manager()

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _get_sync_collection(self, name: Optional[str] = None) -> Collection:
        """Get synchronous collection instance."""
        return self._db_manager.get_sync_collection(name or self.collection_name)

    def _get_async_collection(self, name: Optional[str] = None) -> AsyncIOMotorCollection:
        """Get asynchronous collection instance."""
        return self._db_manager.get_async_collection(name or self.collection_name)

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        """Convert MongoDB document to Pydantic model."""
        if document is None:
            return None
        return self.model_class.model_validate(document)

    def _to_models(self, documents: list[dict[str, Any]]) -> list[T]:
        """Convert list of MongoDB documents to Pydantic models."""
        return [self._to_model(doc) for doc in documents if doc is not None]

    # -------------------------------------------------------------------------
    # Synchronous Reads
    # -------------------------------------------------------------------------

    def get_by_id(self, id_value: str) -> Optional[T]:
        """Get a document by its ID."""
        collection = self._get_sync_collection()
        document = collection.find_one({"_id": to_query_id(id_value)})
        return self._to_model(document)

    def find(self, query: dict[str, Any], sort_by: str = "_id") -> list[T]:
        """Find all documents matching a query in a stable order."""
        collection = self._get_sync_collection()
        cursor = collection.find(query).sort(sort_by, 1)
        return self._to_models(list(cursor))

    def _linked_ids(self, collection_name: str, owner_field: str, owner_id: str) -> list[str]:
        """Read the competency ids linked to an owner document."""
        collection = self._get_sync_collection(collection_name)
        cursor = collection.find(
            {owner_field: {"$in": [owner_id, to_query_id(owner_id)]}},
            {"competency_id": 1},
        ).sort("competency_id", 1)
        return [str(doc["competency_id"]) for doc in cursor]

    # -------------------------------------------------------------------------
    # Asynchronous Reads
    # -------------------------------------------------------------------------

    async def get_by_id_async(self, id_value: str) -> Optional[T]:
        """Get a document by its ID asynchronously."""
        collection = self._get_async_collection()
        document = await collection.find_one({"_id": to_query_id(id_value)})
        return self._to_model(document)

    async def find_async(self, query: dict[str, Any], sort_by: str = "_id") -> list[T]:
        """Find all documents matching a query asynchronously."""
        collection = self._get_async_collection()
        cursor = collection.find(query).sort(sort_by, 1)
        documents = await cursor.to_list(length=None)
        return self._to_models(documents)

    async def _linked_ids_async(
        self, collection_name: str, owner_field: str, owner_id: str
    ) -> list[str]:
        """Read the competency ids linked to an owner document asynchronously."""
        collection = self._get_async_collection(collection_name)
        cursor = collection.find(
            {owner_field: {"$in": [owner_id, to_query_id(owner_id)]}},
            {"competency_id": 1},
        ).sort("competency_id", 1)
        documents = await cursor.to_list(length=None)
        return [str(doc["competency_id"]) for doc in documents]
