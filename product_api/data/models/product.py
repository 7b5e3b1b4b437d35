from sqlalchemy import Column, Double, Integer, String, Text

from product_api.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, default="")
    price = Column(Double, nullable=False, default=0)
    description = Column(Text, nullable=False, default="")
