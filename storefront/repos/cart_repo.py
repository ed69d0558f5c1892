# storefront/repos/cart_repo.py
from typing import List

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.repos import fits_id
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartRepo:
    """
    Cart rows keyed by (user_id, product_id).
    Every mutation commits on its own; there is no transaction spanning calls.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_cart_items(self, user_id: int) -> List[CartItemModel]:
        if not fits_id(user_id):
            return []
        return list(
            self.db.execute(
                select(CartItemModel)
                .where(CartItemModel.user_id == user_id)
                .order_by(CartItemModel.id)
            ).scalars()
        )

    def get_cart_item_by_id(self, item_id: int) -> CartItemModel | None:
        if not fits_id(item_id):
            return None
        return self.db.get(CartItemModel, item_id)

    def get_cart_item(self, user_id: int, product_id: int) -> CartItemModel | None:
        if not (fits_id(user_id) and fits_id(product_id)):
            return None
        return self.db.execute(
            select(CartItemModel).where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
        ).scalar_one_or_none()

    def add_to_cart(self, user_id: int, product_id: int, quantity: int) -> CartItemModel:
        existing = self.get_cart_item(user_id, product_id)

        if existing:
            logger.info(
                f"Product {product_id} already in cart of user {user_id}, "
                f"quantity {existing.quantity} -> {existing.quantity + quantity}"
            )
            return self.update_cart_item(existing.id, existing.quantity + quantity)

        item = CartItemModel(user_id=user_id, product_id=product_id, quantity=quantity)
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        return item

    def update_cart_item(self, item_id: int, quantity: int) -> CartItemModel | None:
        """
        Returns the updated row, or None when the row is missing.
        A quantity <= 0 deletes the row and also returns None.
        """
        item = self.get_cart_item_by_id(item_id)
        if not item:
            return None

        if quantity <= 0:
            self.db.delete(item)
            self.db.commit()
            logger.info(f"Cart item {item_id} removed (quantity {quantity})")
            return None

        item.quantity = quantity
        self.db.commit()
        self.db.refresh(item)
        return item

    def remove_cart_item(self, item_id: int) -> bool:
        item = self.get_cart_item_by_id(item_id)
        if not item:
            return False
        self.db.delete(item)
        self.db.commit()
        return True

    def clear_cart(self, user_id: int) -> bool:
        if not fits_id(user_id):
            return True
        self.db.execute(delete(CartItemModel).where(CartItemModel.user_id == user_id))
        self.db.commit()
        return True
