from sqlalchemy import Column, Integer, String, DateTime, Numeric, JSON
from datetime import datetime, timezone

from storefront.data.database import Base

class OrderModel(Base):
    __tablename__ = "orders"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, nullable=False, index=True)

    order_date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    total_amount = Column(Numeric(10, 2), nullable=False)
    shipping_address = Column(String, nullable=False)
    payment_details = Column(JSON, nullable=False)  # raw checkout form fields, stored as-is
    status = Column(String, nullable=False, default="completed")
