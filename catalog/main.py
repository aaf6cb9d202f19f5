"""데모 엔트리포인트 — 저장소 구성 및 서비스 실행.

Demo entry point — Composition root that wires stores into the service.
Builds an in-memory store and a database store, injects each into a
ProductService and runs a fixed sequence of operations against them.

Usage:
    python -m catalog
"""

import logging

from catalog.config import settings
from catalog.logging_config import setup_logging
from catalog.repositories.base import Repository
from catalog.repositories.database_repository import DatabaseProductRepository
from catalog.repositories.memory_repository import InMemoryProductRepository
from catalog.schemas.product import Product
from catalog.services.product_service import ProductService

logger = logging.getLogger(__name__)

# 백엔드 이름 → 저장소 클래스 — Backend name to repository class
_BACKENDS: dict[str, type[Repository[Product]]] = {
    "memory": InMemoryProductRepository,
    "database": DatabaseProductRepository,
}


def build_repository(backend: str | None = None) -> Repository[Product]:
    """백엔드 이름에 해당하는 새 상품 저장소를 생성합니다.

    Build a fresh product repository for the given backend name.

    Args:
        backend: "memory" 또는 "database", None이면 settings.REPOSITORY_BACKEND
                 ("memory" or "database"; defaults to settings.REPOSITORY_BACKEND)

    Returns:
        Repository[Product]: 새 저장소 인스턴스 (New repository instance)

    Raises:
        ValueError: 알 수 없는 백엔드 이름 (Unknown backend name)
    """
    name: str = backend or settings.REPOSITORY_BACKEND
    try:
        repository_class = _BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown repository backend: {name!r}") from None
    return repository_class()


def run_demo() -> None:
    """고정된 데모 시나리오를 실행합니다.

    Run the fixed demo sequence: create and fetch a product through the
    in-memory store, then create a product through the database store.
    """
    logger.info("%s demo starting", settings.APP_NAME)

    # 메모리 저장소 — In-memory store
    memory_service = ProductService(build_repository("memory"))
    laptop: Product = memory_service.create_product("Laptop", 1200.0)
    print(f"Created: {laptop!r}")
    print(f"Found: {memory_service.get_product(laptop.id)!r}")

    # 데이터베이스 저장소 — 서비스 코드는 동일 (Same service code, different store)
    database_repository: Repository[Product] = build_repository("database")
    try:
        database_service = ProductService(database_repository)
        mouse: Product = database_service.create_product("Mouse", 25.0)
        print(f"Created: {mouse!r}")
    finally:
        database_repository.close()


def main() -> int:
    """데모를 실행하고 종료 코드를 반환합니다 — Run the demo and return the exit status."""
    setup_logging()
    run_demo()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
