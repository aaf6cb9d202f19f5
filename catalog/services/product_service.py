"""상품 서비스 — 상품 CRUD 비즈니스 로직.

Product Service — Business logic for product operations.
Works against any Repository[Product]; which store is injected is decided by
the composition root, never by this module.
"""

from catalog.repositories.base import Repository
from catalog.schemas.product import Product


class ProductService:
    """상품 관련 비즈니스 로직을 처리하는 서비스.

    Service handling product business logic.
    Missing products are returned as None; deciding what a missing product
    means is left to the caller.
    """

    def __init__(self, repository: Repository[Product]) -> None:
        """서비스를 초기화합니다.

        Initialize the service with the repository it will use for its lifetime.

        Args:
            repository: 상품 저장소 (Product repository)
        """
        self._repository: Repository[Product] = repository

    @property
    def repository(self) -> Repository[Product]:
        """주입된 저장소 (읽기 전용) — The injected repository (read-only)."""
        return self._repository

    def create_product(self, name: str, price: float) -> Product:
        """새 상품을 생성합니다.

        Create a product from the given fields and persist it.

        Args:
            name: 상품 이름 (Product name)
            price: 상품 가격 (Product price)

        Returns:
            Product: 식별자가 부여된 상품 (Stored product with its identifier)
        """
        return self._repository.save(Product(name=name, price=price))

    def get_product(self, product_id: int) -> Product | None:
        """ID로 상품을 조회합니다.

        Retrieve a product by identifier.

        Args:
            product_id: 상품 ID (Product identifier)

        Returns:
            Product | None: 조회된 상품 또는 None (Found product or None)
        """
        return self._repository.find_by_id(product_id)

    def list_products(self) -> list[Product]:
        """전체 상품 목록 — List every stored product."""
        return self._repository.find_all()

    def update_product(
        self,
        product_id: int,
        *,
        name: str | None = None,
        price: float | None = None,
    ) -> Product | None:
        """상품 정보를 부분 수정합니다.

        Partially update a product. Only fields that are not None are changed.

        Args:
            product_id: 상품 ID (Product identifier)
            name: 변경할 이름 (New name, optional)
            price: 변경할 가격 (New price, optional)

        Returns:
            Product | None: 수정된 상품, 없으면 None (Updated product, or None if missing)
        """
        product: Product | None = self._repository.find_by_id(product_id)
        if product is None:
            return None

        update_data: dict[str, object] = {}
        if name is not None:
            update_data["name"] = name
        if price is not None:
            update_data["price"] = price

        if not update_data:
            return product
        # 재검증으로 타입 강제 변환 유지 — Re-validate so field coercion still applies
        return self._repository.save(
            Product.model_validate({**product.model_dump(), **update_data})
        )

    def delete_product(self, product_id: int) -> None:
        """상품을 삭제합니다. 없는 ID는 무시됩니다 — Delete a product; unknown ids are ignored."""
        self._repository.delete_by_id(product_id)
