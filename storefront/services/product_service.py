# storefront/services/product_service.py
from typing import List
from sqlalchemy.orm import Session

from storefront.domain.schemas import ProductOut
from storefront.repos.product_repo import ProductRepo


class ProductService:
    """Read-only catalog queries; results are detached snapshots."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def get_products(self) -> List[ProductOut]:
        return [ProductOut.model_validate(p) for p in self.repo.get_products()]

    def get_product(self, product_id: int) -> ProductOut | None:
        product = self.repo.get_product(product_id)
        if not product:
            return None
        return ProductOut.model_validate(product)

    def get_products_by_category(self, category: str) -> List[ProductOut]:
        return [
            ProductOut.model_validate(p)
            for p in self.repo.get_products_by_category(category)
        ]

    def get_categories(self) -> List[str]:
        return self.repo.get_categories()

    def count(self) -> int:
        return self.repo.count()
