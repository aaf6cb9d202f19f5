"""상품 카탈로그 — 저장소 패턴 예제 패키지.

Product Catalog — Repository pattern example package.
A Product entity, a storage-agnostic Repository abstraction, interchangeable
in-memory and database-backed stores, and a service that depends only on
the abstraction.
"""

__version__ = "1.0.0"
