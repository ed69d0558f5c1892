# storefront/services/order_service.py
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List

from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel
from storefront.domain.schemas import CheckoutIn, OrderOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.settings import SHIPPING_FEE, FREE_SHIPPING_THRESHOLD, TAX_RATE
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CENT = Decimal("0.01")


def compute_totals(
    subtotal: Decimal,
    shipping_fee: Decimal = SHIPPING_FEE,
    free_shipping_threshold: Decimal = FREE_SHIPPING_THRESHOLD,
    tax_rate: Decimal = TAX_RATE,
) -> Dict[str, Decimal]:
    """
    Shipping is charged below the threshold; at or above it shipping is free.
    Tax applies to subtotal + shipping. Only the total is rounded to cents.
    """
    shipping = shipping_fee if subtotal < free_shipping_threshold else Decimal("0.00")
    taxable = subtotal + shipping
    tax = taxable * tax_rate
    total = (taxable + tax).quantize(CENT, rounding=ROUND_HALF_UP)
    return {
        "subtotal": subtotal,
        "shipping": shipping,
        "tax": tax,
        "total": total,
    }


class OrderService:
    """
    Checkout and order queries.

    Checkout is not atomic: the order is committed first and the cart is
    cleared in a second commit. A crash in between leaves both the order and
    the old cart rows.
    """

    def __init__(self, db: Session):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.products = ProductRepo(db)

    def cart_subtotal(self, user_id: int) -> Decimal:
        subtotal = Decimal("0.00")
        for item in self.carts.get_cart_items(user_id):
            product = self.products.get_product(item.product_id)
            # rows whose product vanished do not count
            if product:
                subtotal += Decimal(product.price) * item.quantity
        return subtotal

    def checkout(self, user_id: int, form: CheckoutIn) -> OrderOut:
        if not self.carts.get_cart_items(user_id):
            raise ValueError("Cart is empty")

        totals = compute_totals(self.cart_subtotal(user_id))

        order = self.repo.create_order(
            OrderModel(
                user_id=user_id,
                total_amount=totals["total"],
                shipping_address=f"{form.address}, {form.city}, {form.zip}",
                # stored as submitted, nothing is charged
                payment_details={
                    "name": form.name,
                    "email": form.email,
                    "cardNumber": form.card_number,
                    "expiration": form.expiration,
                    "cvv": form.cvv,
                },
                status="completed",
            )
        )
        logger.info(
            f"Order {order.id} created for user {user_id}: "
            f"subtotal {totals['subtotal']}, shipping {totals['shipping']}, total {totals['total']}"
        )

        self.carts.clear_cart(user_id)

        return OrderOut.model_validate(order)

    def get_orders(self, user_id: int) -> List[OrderOut]:
        return [OrderOut.model_validate(o) for o in self.repo.get_orders_by_user_id(user_id)]
