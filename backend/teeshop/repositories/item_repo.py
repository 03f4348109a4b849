from decimal import ROUND_FLOOR, Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from teeshop.models.item import Item
from teeshop.schemas.item_schema import ItemFilter
from sqlalchemy import func
from sqlalchemy.orm import Session


# largest value a SQLite INTEGER column can hold
MAX_CENTS = 2**63 - 1


def _price_bound_cents(price: float) -> int:
    # floor, so a bound like 9.995 does not admit 10.00
    cents = int((Decimal(str(price)) * 100).to_integral_value(rounding=ROUND_FLOOR))
    return min(cents, MAX_CENTS)


class ItemRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, item_id: str) -> Optional[Item]:
        return self.db.query(Item).filter(Item.id == item_id).first()

    def count(self) -> int:
        return self.db.query(Item).count()

    def list(
        self, filters: Optional[ItemFilter] = None, offset: int = 0, limit: int = 10
    ) -> Tuple[List[Item], int]:
        query = self.db.query(Item)
        if filters is not None:
            if filters.name:
                query = query.filter(
                    func.lower(Item.name).contains(filters.name.lower(), autoescape=True)
                )
            if filters.color:
                query = query.filter(func.lower(Item.color) == filters.color.lower())
            if filters.size is not None:
                query = query.filter(Item.size == filters.size.value)
            if filters.price is not None:
                query = query.filter(Item.price_cents <= _price_bound_cents(filters.price))
        total = query.count()
        items = query.order_by(Item.pk).offset(offset).limit(limit).all()
        return items, total

    def bulk_create(self, rows: Iterable[Dict]) -> int:
        """Insert items from dicts with keys id (optional), name, color, size, price_cents, stock."""
        items = [Item(**row) for row in rows]
        self.db.add_all(items)
        self.db.flush()
        return len(items)
