"""ORM model for catalog products."""

from sqlalchemy import CheckConstraint, Column, Float, Integer, String, Text

from app.models.base import Base


class Product(Base):
    """A product in the catalog. Managed by admins, readable by any signed-in user."""

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Float, nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
