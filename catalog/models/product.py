"""상품 SQLAlchemy ORM 모델 정의.

Product SQLAlchemy ORM model definition backing the database store.

Tables:
    - products: 상품 레코드 (Product records)
"""

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from catalog.database import Base


class ProductRecord(Base):
    """상품 테이블 레코드.

    Row representation of a Product in the products table.
    Identifiers are assigned by the repository, never by the database.

    Attributes:
        id: 상품 식별자 (Product identifier)
        name: 상품 이름 (Product name)
        price: 상품 가격 (Product price)
    """

    __tablename__ = "products"

    # 상품 식별자 — 저장소가 부여 (Assigned by the repository; no autoincrement)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    # 상품 이름 — Product display name (max 255 chars, required)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
