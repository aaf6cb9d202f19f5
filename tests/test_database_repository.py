"""데이터베이스 저장소 테스트.

Database repository tests — connection lifecycle, seeding, and persistence
of existing rows across store instances sharing a database file.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from catalog.exceptions import RepositoryClosedError
from catalog.repositories.database_repository import DatabaseProductRepository
from catalog.schemas.product import Product


class TestDatabaseLifecycle:
    """연결 수명 주기 테스트."""

    def test_connects_lazily(self, database_repository):
        """첫 작업 시 자동 연결."""
        assert database_repository.is_connected is False
        database_repository.find_all()
        assert database_repository.is_connected is True

    def test_connect_is_idempotent(self, database_repository):
        """connect 중복 호출 안전."""
        database_repository.connect()
        database_repository.save(Product(name="A", price=1.0))
        database_repository.connect()
        assert database_repository.count() == 1

    def test_operations_after_close_raise(self, database_repository):
        """close 이후 작업 시 RepositoryClosedError."""
        database_repository.save(Product(name="A", price=1.0))
        database_repository.close()
        assert database_repository.is_connected is False
        with pytest.raises(RepositoryClosedError):
            database_repository.find_by_id(1)
        with pytest.raises(RepositoryClosedError):
            database_repository.connect()

    def test_close_is_idempotent(self, database_repository):
        """close 중복 호출 안전."""
        database_repository.close()
        database_repository.close()
        assert database_repository.is_connected is False

    def test_context_manager_closes(self):
        """with 블록 종료 시 연결 해제."""
        with DatabaseProductRepository(url="sqlite+pysqlite:///:memory:") as repo:
            assert repo.is_connected is True
            saved = repo.save(Product(name="Mouse", price=25.0))
            assert repo.find_by_id(saved.id) == saved
        assert repo.is_connected is False
        with pytest.raises(RepositoryClosedError):
            repo.find_all()

    def test_closed_error_message(self):
        """기본 오류 메시지."""
        assert str(RepositoryClosedError()) == "Repository connection is closed"


class TestDatabaseData:
    """데이터 관련 테스트."""

    def test_seeded_rows_and_counter(self):
        """시드 데이터 저장 및 카운터 시작값."""
        with DatabaseProductRepository(initial=[Product(id=4, name="Seed", price=9.5)]) as repo:
            assert repo.find_by_id(4) == Product(id=4, name="Seed", price=9.5)
            assert repo.save(Product(name="Next", price=1.0)).id == 5

    def test_seed_without_id_rejected(self):
        """ID 없는 시드 엔티티는 ValueError."""
        with pytest.raises(ValueError):
            DatabaseProductRepository(initial=[Product(name="A", price=1.0)])

    def test_find_all_ordered_by_id(self, database_repository):
        """ID 순으로 반환."""
        database_repository.save(Product(id=5, name="Five", price=5.0))
        database_repository.save(Product(id=2, name="Two", price=2.0))
        assert [p.id for p in database_repository.find_all()] == [2, 5]

    def test_separate_instances_have_separate_databases(self):
        """메모리 DB는 인스턴스마다 독립."""
        with DatabaseProductRepository() as first, DatabaseProductRepository() as second:
            first.save(Product(name="A", price=1.0))
            assert second.find_all() == []
            assert second.save(Product(name="B", price=2.0)).id == 1

    def test_counter_primed_from_existing_rows(self, tmp_path):
        """기존 DB 파일의 최대 ID 다음부터 부여."""
        url = f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}"
        with DatabaseProductRepository(url=url) as repo:
            repo.save(Product(name="A", price=1.0))
            repo.save(Product(name="B", price=2.0))

        with DatabaseProductRepository(url=url) as reopened:
            assert reopened.count() == 2
            assert reopened.save(Product(name="C", price=3.0)).id == 3


class TestDatabaseConnectFailure:
    """연결 준비 실패 테스트."""

    def test_failed_seed_leaves_store_disconnected(self, tmp_path):
        """시드 저장 실패 시 미연결 상태 유지, 재시도 시 다시 실패."""
        url = f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}"
        # name=None은 NOT NULL 제약 위반 (Bypasses validation to violate NOT NULL)
        broken = Product.model_construct(id=9, name=None, price=1.0)
        repo = DatabaseProductRepository(url=url, initial=[broken])

        with pytest.raises(IntegrityError):
            repo.connect()
        assert repo.is_connected is False

        with pytest.raises(IntegrityError):
            repo.save(Product(name="After", price=2.0))
        assert repo.is_connected is False
        repo.close()

        with DatabaseProductRepository(url=url) as reopened:
            assert reopened.find_all() == []

    def test_failed_connect_does_not_advance_counter(self, tmp_path):
        """실패한 시드의 ID는 카운터에 반영되지 않음."""
        url = f"sqlite+pysqlite:///{tmp_path / 'catalog.db'}"
        repo = DatabaseProductRepository(
            url=url, initial=[Product.model_construct(id=50, name=None, price=1.0)]
        )
        with pytest.raises(IntegrityError):
            repo.connect()
        repo.close()

        with DatabaseProductRepository(url=url) as reopened:
            assert reopened.save(Product(name="First", price=1.0)).id == 1
