# storefront/services/cart_service.py
from typing import List
from sqlalchemy.orm import Session

from storefront.domain.schemas import CartItemCreate, CartItemOut, CartLineOut, ProductOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases for the cart domain.
    query (get_cart) only reads; commands (add, update, remove, clear) mutate.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    # query
    def get_cart(self, user_id: int) -> List[CartLineOut]:
        lines = []
        for item in self.repo.get_cart_items(user_id):
            product = self.products.get_product(item.product_id)
            lines.append(
                CartLineOut(
                    id=item.id,
                    product=ProductOut.model_validate(product) if product else None,
                    quantity=item.quantity,
                )
            )
        return lines

    def get_items(self, user_id: int) -> List[CartItemOut]:
        return [CartItemOut.model_validate(i) for i in self.repo.get_cart_items(user_id)]

    def get_item(self, item_id: int) -> CartItemOut | None:
        item = self.repo.get_cart_item_by_id(item_id)
        return CartItemOut.model_validate(item) if item else None

    # commands
    def add_product(self, payload: CartItemCreate) -> CartItemOut:
        """
        Adds a product line to the user's cart, merging with an existing line
        for the same product. Raises LookupError when the product is unknown.
        """
        if not self.products.get_product(payload.product_id):
            raise LookupError("Product not found")

        item = self.repo.add_to_cart(
            user_id=payload.user_id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )
        logger.info(
            f"Cart item {item.id}: product {item.product_id} x{item.quantity} "
            f"for user {item.user_id}"
        )
        return CartItemOut.model_validate(item)

    def update_quantity(self, item_id: int, quantity: int) -> CartItemOut | None:
        # None covers both a missing row and a row removed by quantity <= 0
        item = self.repo.update_cart_item(item_id, quantity)
        return CartItemOut.model_validate(item) if item else None

    def remove_item(self, item_id: int) -> bool:
        removed = self.repo.remove_cart_item(item_id)
        if removed:
            logger.info(f"Cart item {item_id} removed")
        return removed

    def clear(self, user_id: int) -> bool:
        logger.info(f"Clearing cart of user {user_id}")
        return self.repo.clear_cart(user_id)
