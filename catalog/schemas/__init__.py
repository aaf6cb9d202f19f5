"""스키마 패키지 — Pydantic 엔티티 정의.

Schema package — Pydantic entity definitions.
Entities are the plain data records repositories store and return.
"""
