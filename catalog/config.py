"""애플리케이션 환경 설정 모듈.

Application configuration module using pydantic-settings.
All settings can be overridden via environment variables or a .env file.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

# .env 파일 절대 경로 — CWD와 무관하게 항상 프로젝트 루트의 .env를 참조
# Absolute path to .env file — ensures correct loading regardless of CWD
_ENV_FILE: Path = Path(__file__).resolve().parent.parent / ".env"


class Settings(BaseSettings):
    """애플리케이션 전역 설정 — 환경 변수 기반 구성.

    Global application settings loaded from environment variables.
    Uses pydantic-settings for automatic env var parsing and .env file support.

    Attributes:
        APP_NAME: 애플리케이션 표시 이름 (Application display name)
        DEBUG: 디버그 모드 플래그 (Debug mode flag, enables SQL echo)
        LOG_LEVEL: 루트 로거 레벨 (Root logger level name)
        REPOSITORY_BACKEND: 기본 저장소 구현 (Default repository backend)
        DATABASE_URL: 데이터베이스 저장소용 SQLAlchemy URL (SQLAlchemy URL for the database store)
        AXIOM_API_TOKEN: Axiom API 토큰 (Axiom API token, optional)
        AXIOM_DATASET: Axiom 데이터셋 이름 (Axiom dataset name, optional)
    """

    # 앱 메타데이터 — Application metadata
    APP_NAME: str = "Product Catalog"
    DEBUG: bool = False  # True이면 SQLAlchemy SQL 로그 출력 (Enables SQL echo when True)
    LOG_LEVEL: str = "INFO"

    # 저장소 선택 — "memory" | "database" (Which store the composition root builds)
    REPOSITORY_BACKEND: Literal["memory", "database"] = "memory"

    # 데이터베이스 — 기본값은 저장소 인스턴스 수명 동안만 유지되는 SQLite 메모리 DB
    # Defaults to an in-memory SQLite database that lives as long as the store instance
    DATABASE_URL: str = "sqlite+pysqlite:///:memory:"

    # Axiom 로깅 설정 — Axiom observability platform settings
    AXIOM_API_TOKEN: str = ""  # Axiom API 토큰 (API token from Axiom dashboard)
    AXIOM_DATASET: str = ""  # Axiom 데이터셋 이름 (Dataset name for application logs)

    model_config = {"env_file": _ENV_FILE, "env_file_encoding": "utf-8"}


# 전역 설정 싱글턴 인스턴스 — Global settings singleton instance
settings: Settings = Settings()
