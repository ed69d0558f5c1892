# import every model so SQLAlchemy registers it on Base.metadata

from storefront.data.models.user import UserModel
from storefront.data.models.product import ProductModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel

__all__ = ["UserModel", "ProductModel", "CartItemModel", "OrderModel"]
