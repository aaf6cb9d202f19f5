"""저장소 예외 클래스 모듈.

Repository exception classes module.
Missing entities are never signalled with an exception (repositories return None);
these cover lifecycle misuse of a store.

Usage:
    from catalog.exceptions import RepositoryClosedError
    raise RepositoryClosedError()
"""


class RepositoryError(Exception):
    """저장소 기본 예외 — 모든 저장소 오류의 부모 클래스.

    Base exception for repository failures.

    Args:
        detail: 오류 메시지 (Error message, default: "Repository error")
    """

    def __init__(self, detail: str = "Repository error") -> None:
        super().__init__(detail)
        self.detail: str = detail


class RepositoryClosedError(RepositoryError):
    """닫힌 저장소 사용 예외 — close() 이후 작업을 시도할 때 사용.

    Raised when an operation is attempted on a database store after close().

    Args:
        detail: 오류 메시지 (Error message, default: "Repository connection is closed")
    """

    def __init__(self, detail: str = "Repository connection is closed") -> None:
        super().__init__(detail)
