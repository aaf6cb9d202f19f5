"""식별자 시퀀스 유틸리티.

Identifier sequence utility shared by the repository implementations.
Each store owns its own sequence instance; there is no process-wide counter.
"""


class IdSequence:
    """단조 증가 정수 식별자 생성기.

    Monotonically increasing integer identifier generator.
    Identifiers are never handed out twice by the same sequence, including
    values that were observed from explicitly identified entities.

    Attributes:
        current: 마지막으로 부여되었거나 관찰된 최대 식별자
                 (Highest identifier assigned or observed so far)
    """

    def __init__(self, start: int = 0) -> None:
        self.current: int = start

    def next(self) -> int:
        """다음 식별자를 부여합니다 — Assign the next identifier."""
        self.current += 1
        return self.current

    def observe(self, value: int) -> None:
        """외부에서 지정된 식별자를 반영합니다.

        Advance past an identifier that was assigned outside this sequence
        (pre-seeded rows, explicit ids on save) so it is never reissued.
        """
        if value > self.current:
            self.current = value
