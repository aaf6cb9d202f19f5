"""데이터베이스 레포지토리 — SQLAlchemy 기반 외부 저장소 대역.

Database Repository — SQLAlchemy-backed stand-in for an external database.
Implements the same contract and identifier policy as the in-memory store, so
services work unchanged when either one is injected. Each instance owns a
private engine; with the default in-memory SQLite URL the data lives exactly
as long as the repository.

Usage:
    with DatabaseProductRepository() as repo:
        repo.save(Product(name="Mouse", price=25.0))
"""

import logging
from collections.abc import Iterable
from types import TracebackType
from typing import Any

from sqlalchemy import Engine, Select, func, select
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from catalog.config import settings
from catalog.database import Base, create_db_engine
from catalog.exceptions import RepositoryClosedError
from catalog.models.product import ProductRecord
from catalog.repositories.base import EntityType, Repository
from catalog.schemas.product import Product
from catalog.utils.sequence import IdSequence

logger = logging.getLogger(__name__)


class DatabaseRepository(Repository[EntityType]):
    """SQLAlchemy 세션 기반 제네릭 저장소.

    Generic repository storing entities as ORM records.
    Entities are converted to records with ``model_dump`` and back with
    ``model_validate(from_attributes=True)``, so the record model must expose
    the same column names as the entity fields.

    The store connects lazily on first use (or via ``connect()``); once
    ``close()`` has been called every operation raises RepositoryClosedError.
    Identifiers come from a sequence owned by the instance, primed from the
    highest identifier already present in the table.

    Attributes:
        entity_type: 이 저장소가 반환하는 엔티티 클래스 (Entity class returned by this store)
        record_type: 이 저장소가 관리하는 ORM 모델 클래스 (ORM model class this store manages)
    """

    def __init__(
        self,
        entity_type: type[EntityType],
        record_type: type[Base],
        url: str | None = None,
        echo: bool | None = None,
        initial: Iterable[EntityType] = (),
    ) -> None:
        """저장소를 초기화합니다. 연결은 첫 사용 시점까지 지연됩니다.

        Initialize the repository. No connection is opened until first use.

        Args:
            entity_type: 엔티티 클래스 (Entity class)
            record_type: ORM 모델 클래스 (ORM model class)
            url: SQLAlchemy 연결 URL, None이면 settings.DATABASE_URL
                 (Connection URL; defaults to settings.DATABASE_URL)
            echo: SQL 로그 출력 여부, None이면 settings.DEBUG
                  (SQL echo flag; defaults to settings.DEBUG)
            initial: 연결 시 미리 채워둘 엔티티, 모두 식별자가 있어야 함
                     (Entities written on connect; each must carry an identifier)

        Raises:
            ValueError: 식별자가 없는 시드 엔티티 (A seed entity has no identifier)
        """
        self.entity_type: type[EntityType] = entity_type
        self.record_type: type[Base] = record_type
        self._url: str = url or settings.DATABASE_URL
        self._echo: bool = settings.DEBUG if echo is None else echo

        self._initial: list[EntityType] = list(initial)
        if any(entity.id is None for entity in self._initial):
            raise ValueError("Seed entities must have an identifier")

        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None
        self._sequence: IdSequence = IdSequence()
        self._closed: bool = False

    # ------------------------------------------------------------------
    # 연결 수명 주기 — Connection lifecycle
    # ------------------------------------------------------------------

    @property
    def is_connected(self) -> bool:
        """엔진이 열려 있는지 여부 — Whether the engine is currently open."""
        return self._engine is not None

    def connect(self) -> None:
        """데이터베이스에 연결하고 스키마를 준비합니다.

        Open the engine, create the table if needed, prime the identifier
        sequence from the existing rows and write any seed entities.
        Calling it on an already connected store does nothing.

        Raises:
            RepositoryClosedError: 이미 닫힌 저장소 (The store was closed)
            SQLAlchemyError: 준비 실패 시 엔진을 해제하고 재발생, 저장소는 미연결 상태 유지
                             (Setup failed; the engine is disposed and the store stays disconnected)
        """
        if self._closed:
            raise RepositoryClosedError()
        if self._engine is not None:
            return

        logger.info(
            "Connecting to database %s",
            make_url(self._url).render_as_string(hide_password=True),
        )
        engine: Engine = create_db_engine(self._url, echo=self._echo)
        session_factory: sessionmaker[Session] = sessionmaker(engine, expire_on_commit=False)

        # 준비 작업이 커밋된 뒤에만 연결 상태로 전환 — Only become connected after setup commits
        try:
            Base.metadata.create_all(engine, tables=[self.record_type.__table__])
            with session_factory() as db, db.begin():
                max_id: int | None = db.scalar(select(func.max(self.record_type.id)))
                for entity in self._initial:
                    db.merge(self._to_record(entity))
        except Exception:
            engine.dispose()
            raise

        self._sequence.observe(max_id or 0)
        for entity in self._initial:
            self._sequence.observe(entity.id)
        self._initial = []

        self._engine = engine
        self._session_factory = session_factory

    def close(self) -> None:
        """엔진을 해제합니다. 여러 번 호출해도 안전합니다.

        Dispose the engine. Safe to call more than once.
        """
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Disconnected from database")
        self._engine = None
        self._session_factory = None
        self._closed = True

    def __enter__(self) -> "DatabaseRepository[EntityType]":
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _session(self) -> Session:
        """작업용 새 세션을 엽니다 — Open a fresh session, connecting lazily."""
        if self._closed:
            raise RepositoryClosedError()
        if self._session_factory is None:
            self.connect()
        return self._session_factory()

    # ------------------------------------------------------------------
    # 엔티티 ↔ 레코드 변환 — Entity/record conversion
    # ------------------------------------------------------------------

    def _to_record(self, entity: EntityType) -> Any:
        return self.record_type(**entity.model_dump())

    def _to_entity(self, record: Any) -> EntityType:
        return self.entity_type.model_validate(record, from_attributes=True)

    # ------------------------------------------------------------------
    # 저장소 작업 — Repository operations
    # ------------------------------------------------------------------

    def save(self, entity: EntityType) -> EntityType:
        with self._session() as db, db.begin():
            if entity.id is None:
                entity = entity.model_copy(update={"id": self._sequence.next()})
            else:
                self._sequence.observe(entity.id)
            # merge: 같은 ID가 있으면 덮어쓰기 (Overwrites a row with the same id)
            db.merge(self._to_record(entity))

        logger.info("Saved %s id=%s to database", self.entity_type.__name__, entity.id)
        return entity

    def find_by_id(self, entity_id: int) -> EntityType | None:
        with self._session() as db:
            record = db.get(self.record_type, entity_id)
            if record is None:
                return None
            return self._to_entity(record)

    def delete_by_id(self, entity_id: int) -> None:
        with self._session() as db, db.begin():
            record = db.get(self.record_type, entity_id)
            if record is None:
                return
            db.delete(record)

        logger.info("Deleted %s id=%s from database", self.entity_type.__name__, entity_id)

    def find_all(self) -> list[EntityType]:
        query: Select = select(self.record_type).order_by(self.record_type.id)
        with self._session() as db:
            return [self._to_entity(record) for record in db.scalars(query)]

    def count(self) -> int:
        query: Select = select(func.count()).select_from(self.record_type)
        with self._session() as db:
            return db.scalar(query) or 0


class DatabaseProductRepository(DatabaseRepository[Product]):
    """상품 테이블에 대한 데이터베이스 저장소.

    Database repository for the products table.
    """

    def __init__(
        self,
        url: str | None = None,
        echo: bool | None = None,
        initial: Iterable[Product] = (),
    ) -> None:
        """DatabaseProductRepository를 초기화합니다.

        Initialize the repository with the Product entity and ProductRecord model.
        """
        super().__init__(Product, ProductRecord, url=url, echo=echo, initial=initial)
