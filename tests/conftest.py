"""테스트 인프라 — 저장소 및 서비스 픽스처.

Test infrastructure — Repository and service fixtures.
Every database store uses its own private in-memory SQLite database and is
closed after the test. The ``repository`` fixture is parametrized so contract
tests run once per store implementation.
"""

from collections.abc import Generator

import pytest

from catalog.repositories.base import Repository
from catalog.repositories.database_repository import DatabaseProductRepository
from catalog.repositories.memory_repository import InMemoryProductRepository
from catalog.schemas.product import Product
from catalog.services.product_service import ProductService

TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


@pytest.fixture
def memory_repository() -> InMemoryProductRepository:
    """빈 메모리 저장소를 생성합니다."""
    return InMemoryProductRepository()


@pytest.fixture
def database_repository() -> Generator[DatabaseProductRepository, None, None]:
    """빈 데이터베이스 저장소를 생성하고 테스트 후 닫습니다."""
    repo = DatabaseProductRepository(url=TEST_DATABASE_URL, echo=False)
    yield repo
    repo.close()


@pytest.fixture(params=["memory", "database"])
def repository(request: pytest.FixtureRequest) -> Repository[Product]:
    """저장소 구현별로 한 번씩 실행되는 계약 테스트용 저장소."""
    return request.getfixturevalue(f"{request.param}_repository")


@pytest.fixture
def service(repository: Repository[Product]) -> ProductService:
    """주입된 저장소 위의 상품 서비스."""
    return ProductService(repository)
