"""메모리 레포지토리 — 프로세스 메모리 딕셔너리 기반 저장소.

In-memory Repository — Store backed by a dictionary held in process memory.
Entities live as long as the repository instance; nothing is persisted.
"""

import logging
from collections.abc import Iterable

from catalog.repositories.base import EntityType, Repository
from catalog.schemas.product import Product
from catalog.utils.sequence import IdSequence

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[EntityType]):
    """딕셔너리 기반 제네릭 저장소.

    Generic repository keeping entities in a dict keyed by identifier.
    find_all() returns entities in insertion order. Single-threaded use only.

    Attributes:
        _items: 식별자 → 엔티티 매핑 (Identifier to entity mapping)
        _sequence: 이 인스턴스 전용 식별자 시퀀스 (Identifier sequence owned by this instance)
    """

    def __init__(self, initial: Iterable[EntityType] = ()) -> None:
        """저장소를 초기화합니다.

        Initialize the repository, optionally pre-seeded with entities.

        Args:
            initial: 미리 채워둘 엔티티, 모두 식별자가 있어야 함
                     (Entities to pre-seed; each must already carry an identifier)

        Raises:
            ValueError: 식별자가 없는 시드 엔티티 (A seed entity has no identifier)
        """
        self._items: dict[int, EntityType] = {}
        self._sequence: IdSequence = IdSequence()

        for entity in initial:
            if entity.id is None:
                raise ValueError("Seed entities must have an identifier")
            self._items[entity.id] = entity
            self._sequence.observe(entity.id)

    def save(self, entity: EntityType) -> EntityType:
        if entity.id is None:
            entity = entity.model_copy(update={"id": self._sequence.next()})
        else:
            self._sequence.observe(entity.id)

        self._items[entity.id] = entity
        logger.debug("Saved %s id=%s", type(entity).__name__, entity.id)
        return entity

    def find_by_id(self, entity_id: int) -> EntityType | None:
        return self._items.get(entity_id)

    def delete_by_id(self, entity_id: int) -> None:
        # 없는 ID는 무시 — Unknown ids are ignored
        if self._items.pop(entity_id, None) is not None:
            logger.debug("Deleted id=%s", entity_id)

    def find_all(self) -> list[EntityType]:
        return list(self._items.values())

    def count(self) -> int:
        return len(self._items)


class InMemoryProductRepository(InMemoryRepository[Product]):
    """상품 전용 메모리 저장소 — In-memory repository for products."""
