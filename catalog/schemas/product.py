"""상품 엔티티 스키마 정의.

Product entity schema definition.
"""

from pydantic import Field

from catalog.schemas.common import Entity


class Product(Entity):
    """상품 엔티티.

    Product entity with a name and a price.

    Attributes:
        id: 상품 식별자 (Product identifier, assigned by the store)
        name: 상품 이름 (Product name)
        price: 상품 가격 (Product price)
    """

    name: str  # 상품 이름 (Product display name)
    # 상품 가격 — 음수 검증 없음, NaN/무한대는 거부 (Not range-checked; NaN and infinity rejected)
    price: float = Field(allow_inf_nan=False)
