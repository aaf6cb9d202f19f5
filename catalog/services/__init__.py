"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services depend only on the Repository abstraction; the concrete store is
injected by the caller at construction time.
"""
