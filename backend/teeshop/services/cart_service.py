import uuid
from typing import List, Tuple

from sqlalchemy.orm import Session

from teeshop.exceptions import EmptyCart, InsufficientStock, InvalidQuantity, NotInCart
from teeshop.repositories.cart_repo import CartRepository
from teeshop.schemas.item_schema import CartLineOut, CheckoutOut, ItemOut
from teeshop.services.inventory_service import InventoryService
from teeshop.utils.log import get_logger
from teeshop.utils.transactions import locked_transaction

log = get_logger("cart")


class CartService:
    """
    The shared cart. Each mutation reserves or returns stock and changes the
    matching cart line in one locked transaction, so `item.stock` plus the
    line quantity always equals the stock the item was loaded with.
    """

    def __init__(self, db: Session):
        self.db = db
        self.cart_repo = CartRepository(db)
        self.inventory = InventoryService(db)

    def add(self, item_id: str, quantity: int) -> CartLineOut:
        if quantity <= 0:
            raise InvalidQuantity(quantity)
        with locked_transaction(self.db):
            item = self.inventory.load_item(item_id)
            line = self.cart_repo.get_line(item_id)
            if item.stock < quantity:
                log.debug(f"add(): rejected item={item_id} qty={quantity} stock={item.stock}")
                raise InsufficientStock(item_id, available=item.stock, requested=quantity)
            self.inventory.apply_delta(item, -quantity)
            if line:
                line = self.cart_repo.set_quantity(line, line.quantity + quantity)
            else:
                line = self.cart_repo.add_line(item_id, quantity)
            log.info(f"add(): item={item_id} qty={quantity} line={line.quantity} stock={item.stock}")
            return CartLineOut(product=ItemOut.model_validate(item), quantity=line.quantity)

    def remove(self, item_id: str) -> ItemOut:
        with locked_transaction(self.db):
            line = self.cart_repo.get_line(item_id)
            if not line:
                raise NotInCart(item_id)
            item = self.inventory.apply_delta(self.inventory.load_item(item_id), line.quantity)
            self.cart_repo.remove_line(line)
            log.info(f"remove(): item={item_id} returned={line.quantity} stock={item.stock}")
            return ItemOut.model_validate(item)

    def update(self, item_id: str, quantity: int) -> CartLineOut:
        """Set the line for `item_id` to an absolute quantity; use remove() to drop it."""
        if quantity < 1:
            raise InvalidQuantity(quantity)
        with locked_transaction(self.db):
            item = self.inventory.load_item(item_id)
            line = self.cart_repo.get_line(item_id)
            if not line:
                raise NotInCart(item_id)
            # positive needs more stock, negative hands stock back
            delta = quantity - line.quantity
            if item.stock < delta:
                log.debug(f"update(): rejected item={item_id} delta={delta} stock={item.stock}")
                raise InsufficientStock(item_id, available=item.stock, requested=delta)
            if delta:
                self.inventory.apply_delta(item, -delta)
                self.cart_repo.set_quantity(line, quantity)
            log.info(f"update(): item={item_id} qty={quantity} delta={delta} stock={item.stock}")
            return CartLineOut(product=ItemOut.model_validate(item), quantity=line.quantity)

    def list(self, offset: int = 0, limit: int = 10) -> Tuple[List[CartLineOut], int]:
        with locked_transaction(self.db):
            total = self.cart_repo.count()
            rows = self.cart_repo.lines_with_items(offset=offset, limit=limit)
            lines = [
                CartLineOut(product=ItemOut.model_validate(item), quantity=line.quantity)
                for line, item in rows
            ]
            return lines, total

    def checkout(self) -> CheckoutOut:
        """
        Sell everything in the cart at current prices and empty it.

        Stock was taken when lines were added, so it is not touched here and
        is not given back: the reservation becomes a sale.
        """
        with locked_transaction(self.db):
            rows = self.cart_repo.lines_with_items()
            if not rows:
                raise EmptyCart()
            total_cents = sum(item.price_cents * line.quantity for line, item in rows)
            order_id = str(uuid.uuid4())
            self.cart_repo.clear()
            log.info(f"checkout(): order={order_id} lines={len(rows)} total_cents={total_cents}")
            return CheckoutOut(order_id=order_id, total=total_cents / 100)
