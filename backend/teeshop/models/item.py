from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, Integer, String
from teeshop.db import Base

class Item(Base):
    __tablename__ = "items"
    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_items_stock_non_negative"),
        CheckConstraint("price_cents >= 0", name="ck_items_price_non_negative"),
    )

    # insertion order; listings are ordered by it
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False, default=lambda: str(uuid4()))
    name = Column(String(256), nullable=False)
    color = Column(String(64), nullable=False)
    size = Column(String(4), nullable=False)
    price_cents = Column(Integer, nullable=False, default=0)
    # units available for reservation, i.e. not held by the cart
    stock = Column(Integer, default=0, nullable=False)

    @property
    def price(self) -> float:
        return self.price_cents / 100

    def __repr__(self):
        return f"<Item id={self.id} name={self.name} stock={self.stock}>"
