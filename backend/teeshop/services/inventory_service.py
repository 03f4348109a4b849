from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from teeshop.exceptions import InsufficientStock, ItemNotFound
from teeshop.models.item import Item
from teeshop.repositories.item_repo import ItemRepository
from teeshop.schemas.item_schema import ItemFilter, ItemOut
from teeshop.utils.log import get_logger
from teeshop.utils.transactions import locked_transaction

log = get_logger("inventory")


class InventoryService:
    """
    Catalog store: item lookup, filtered listing and the only code path that
    changes `Item.stock`.

    Public methods take the store lock themselves. `load_item` and
    `apply_delta` expect the caller to already hold it inside a
    locked_transaction; CartService uses them so a stock change and its
    cart-line change commit as one unit.
    """

    def __init__(self, db: Session):
        self.db = db
        self.items = ItemRepository(db)

    def load_item(self, item_id: str) -> Item:
        item = self.items.get(item_id)
        if not item:
            raise ItemNotFound(item_id)
        return item

    def apply_delta(self, item: Item, delta: int) -> Item:
        new_stock = item.stock + delta
        if new_stock < 0:
            raise InsufficientStock(item.id, available=item.stock, requested=-delta)
        item.stock = new_stock
        self.db.flush()
        return item

    def get(self, item_id: str) -> ItemOut:
        with locked_transaction(self.db):
            return ItemOut.model_validate(self.load_item(item_id))

    def list(
        self, filters: Optional[ItemFilter] = None, offset: int = 0, limit: int = 10
    ) -> Tuple[List[ItemOut], int]:
        with locked_transaction(self.db):
            items, total = self.items.list(filters, offset=offset, limit=limit)
            return [ItemOut.model_validate(i) for i in items], total

    def count(self) -> int:
        with locked_transaction(self.db):
            return self.items.count()

    def adjust_stock(self, item_id: str, delta: int) -> ItemOut:
        """
        stock += delta for one item. Negative results raise InsufficientStock
        and leave stock unchanged.
        """
        with locked_transaction(self.db):
            item = self.apply_delta(self.load_item(item_id), delta)
            log.info(f"adjust_stock(): item={item_id} delta={delta} stock={item.stock}")
            return ItemOut.model_validate(item)
