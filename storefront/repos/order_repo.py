# storefront/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session
from storefront.data.models.order import OrderModel
from storefront.repos import fits_id


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.commit()
        self.db.refresh(order)
        return order

    def get_order(self, order_id: int) -> OrderModel | None:
        if not fits_id(order_id):
            return None
        return self.db.get(OrderModel, order_id)

    def get_orders_by_user_id(self, user_id: int) -> List[OrderModel]:
        if not fits_id(user_id):
            return []
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.id)
            ).scalars()
        )
