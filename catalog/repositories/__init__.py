"""레포지토리 패키지 — 데이터 접근 계층.

Repository package — Data access layer.
Defines the storage-agnostic Repository abstraction and its interchangeable
implementations (in-memory and database-backed).
"""

from catalog.repositories.base import EntityType, Repository
from catalog.repositories.database_repository import DatabaseProductRepository, DatabaseRepository
from catalog.repositories.memory_repository import InMemoryProductRepository, InMemoryRepository

__all__ = [
    "EntityType",
    "Repository",
    "InMemoryRepository",
    "InMemoryProductRepository",
    "DatabaseRepository",
    "DatabaseProductRepository",
]
