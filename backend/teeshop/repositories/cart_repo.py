from sqlalchemy.orm import Session
from typing import List, Optional, Tuple
from teeshop.models.cart_line import CartLine
from teeshop.models.item import Item

class CartRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_line(self, item_id: str) -> Optional[CartLine]:
        return self.db.query(CartLine).filter(CartLine.item_id == item_id).first()

    def count(self) -> int:
        return self.db.query(CartLine).count()

    def lines_with_items(self, offset: int = 0, limit: Optional[int] = None) -> List[Tuple[CartLine, Item]]:
        query = (
            self.db.query(CartLine, Item)
            .join(Item, CartLine.item_id == Item.id)
            .order_by(CartLine.id)
            .offset(offset)
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def add_line(self, item_id: str, quantity: int) -> CartLine:
        line = CartLine(item_id=item_id, quantity=quantity)
        self.db.add(line)
        self.db.flush()
        return line

    def set_quantity(self, line: CartLine, quantity: int) -> CartLine:
        line.quantity = quantity
        self.db.flush()
        return line

    def remove_line(self, line: CartLine):
        self.db.delete(line)
        self.db.flush()

    def clear(self) -> int:
        removed = self.db.query(CartLine).delete()
        self.db.flush()
        return removed
