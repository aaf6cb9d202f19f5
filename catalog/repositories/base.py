"""기본 레포지토리 추상화 — 모든 저장소 구현의 부모 클래스.

Base Repository abstraction — Parent class for all store implementations.
Defines the storage-agnostic save / find / delete / list contract for one
entity type. Services depend on this class only, never on a concrete store.

Usage:
    class InMemoryProductRepository(InMemoryRepository[Product]):
        ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from catalog.schemas.common import Entity

# 제네릭 타입 변수 — 식별자를 가진 엔티티를 나타냄
# Generic type variable representing an entity with an identifier
EntityType = TypeVar("EntityType", bound=Entity)


class Repository(ABC, Generic[EntityType]):
    """제네릭 저장소 인터페이스.

    Generic repository contract over an entity type.
    Missing entities are reported as None, never as an exception.
    """

    @abstractmethod
    def save(self, entity: EntityType) -> EntityType:
        """엔티티를 저장합니다.

        Persist a new or updated entity.

        If the entity has no identifier, the store assigns a fresh identifier it
        has never handed out before and returns the entity carrying it. If the
        identifier is present, any stored entity with that identifier is
        overwritten (last write wins).

        Args:
            entity: 저장할 엔티티 (Entity to persist)

        Returns:
            EntityType: 식별자가 채워진 저장된 엔티티 (Stored entity with its identifier)
        """

    @abstractmethod
    def find_by_id(self, entity_id: int) -> EntityType | None:
        """ID로 단일 엔티티를 조회합니다.

        Retrieve the entity with exactly this identifier.

        Args:
            entity_id: 조회할 식별자 (Identifier to look up)

        Returns:
            EntityType | None: 조회된 엔티티 또는 None (Found entity or None)
        """

    @abstractmethod
    def delete_by_id(self, entity_id: int) -> None:
        """ID로 엔티티를 삭제합니다.

        Remove the entity with this identifier if present. Deleting an unknown
        identifier is a no-op, so the operation is idempotent.

        Args:
            entity_id: 삭제할 식별자 (Identifier to delete)
        """

    @abstractmethod
    def find_all(self) -> list[EntityType]:
        """저장된 모든 엔티티를 조회합니다.

        Retrieve every currently stored entity. Ordering is implementation-defined.

        Returns:
            list[EntityType]: 엔티티 목록 (List of stored entities)
        """

    def exists_by_id(self, entity_id: int) -> bool:
        """주어진 ID의 엔티티 존재 여부 — Whether an entity with this identifier is stored."""
        return self.find_by_id(entity_id) is not None

    def count(self) -> int:
        """저장된 엔티티 수 — Number of stored entities."""
        return len(self.find_all())

    def close(self) -> None:
        """저장소가 보유한 자원을 해제합니다. 기본 구현은 아무것도 하지 않습니다.

        Release any resources held by the store. The default does nothing;
        stores that own a connection override it.
        """
