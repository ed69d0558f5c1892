from sqlalchemy import Column, Integer, UniqueConstraint

from storefront.data.database import Base


class CartItemModel(Base):
    __tablename__ = "cart_items"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="u_cart_user_product"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True)
    # no FK on product_id: a cart row may outlive its product
    product_id = Column(Integer, nullable=False)
    user_id = Column(Integer, nullable=False, index=True)

    quantity = Column(Integer, nullable=False)
