"""공통 엔티티 베이스 스키마.

Common entity base schema shared by every repository-managed record.
"""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """저장소가 관리하는 엔티티의 베이스 클래스.

    Base class for entities managed by a repository.
    The only requirement a repository places on an entity is an integer
    identifier that stays None until a store assigns it. Entities are frozen;
    a store assigns the identifier by returning an updated copy.

    Attributes:
        id: 저장소가 부여하는 식별자 (Identifier assigned by the store, None until saved)
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None  # 저장 전에는 None (None until the first save)
