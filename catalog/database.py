"""데이터베이스 엔진 및 ORM 베이스 설정 모듈.

Database engine and ORM base configuration module.
Sets up the synchronous SQLAlchemy engine factory and the declarative
base class used by the database-backed repository.
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    All models inherit from this class to register with the metadata.
    """

    pass


def _is_sqlite_memory(url: str) -> bool:
    """SQLite 메모리 DB URL 여부 — Whether the URL points at an in-memory SQLite database."""
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """동기 SQLAlchemy 엔진을 생성합니다.

    Create a synchronous SQLAlchemy engine.
    In-memory SQLite databases exist per connection, so they are pinned to a
    single shared connection (StaticPool) that every session of this engine reuses.

    Args:
        url: SQLAlchemy 연결 URL (SQLAlchemy connection URL)
        echo: SQL 로그 출력 여부 (Whether to echo SQL statements)

    Returns:
        Engine: 생성된 엔진 (The created engine)
    """
    if _is_sqlite_memory(url):
        return create_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    # pool_pre_ping=True: 커넥션 풀에서 꺼낸 연결의 유효성을 사전 확인 (Validates connections before use)
    return create_engine(url, echo=echo, pool_pre_ping=True)
