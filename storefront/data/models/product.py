from sqlalchemy import Column, Integer, String, Text, Numeric, JSON

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False, index=True)
    image = Column(String, nullable=False)
    rating = Column(JSON, nullable=False)  # {"rate": float, "count": int}
