from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String

from teeshop.db import Base


class CartLine(Base):
    __tablename__ = "cart_lines"
    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_cart_lines_quantity_positive"),
    )
    id = Column(Integer, primary_key=True, autoincrement=True)
    # one line per item in the shared cart
    item_id = Column(
        String(36), ForeignKey("items.id"), unique=True, nullable=False, index=True
    )
    quantity = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<CartLine item_id={self.item_id} quantity={self.quantity}>"
