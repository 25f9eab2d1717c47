"""
Data layer for Recruit Match.

Provides database connections, data models, repository classes and the
data sources the matching engine reads from.

Submodules:
- database: MongoDB connection management
- models: Pydantic data models
- repositories: Read-only database queries
- sources: Data source interface and adapters
"""

from .database import DatabaseManager, get_database_manager
from .sources import (
    InMemoryDataSource,
    JsonFileDataSource,
    MatchingDataSource,
    RepositoryDataSource,
)

__all__ = [
    "DatabaseManager",
    "get_database_manager",
    "InMemoryDataSource",
    "JsonFileDataSource",
    "MatchingDataSource",
    "RepositoryDataSource",
]
