# storefront/repos/product_repo.py
from typing import List

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.repos import fits_id


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_products(self) -> List[ProductModel]:
        return list(
            self.db.execute(select(ProductModel).order_by(ProductModel.id)).scalars()
        )

    def get_product(self, product_id: int) -> ProductModel | None:
        if not fits_id(product_id):
            return None
        return self.db.get(ProductModel, product_id)

    def get_products_by_category(self, category: str) -> List[ProductModel]:
        return list(
            self.db.execute(
                select(ProductModel)
                .where(ProductModel.category == category)
                .order_by(ProductModel.id)
            ).scalars()
        )

    def get_categories(self) -> List[str]:
        # distinct, in first-seen order
        rows = self.db.execute(
            select(ProductModel.category)
            .group_by(ProductModel.category)
            .order_by(func.min(ProductModel.id))
        ).scalars()
        return list(rows)

    def count(self) -> int:
        return self.db.execute(select(func.count(ProductModel.id))).scalar_one()

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
