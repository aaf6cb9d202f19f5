"""SQLAlchemy ORM 모델 패키지 — 모든 테이블 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all table models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata before the database store creates its schema.

Modules:
    product: 상품 테이블 레코드 (Product table record)
"""

from catalog.models.product import ProductRecord

__all__ = [
    "ProductRecord",
]
