class InventoryException(Exception):
    """Base class for every recoverable store error; `status_code` is the HTTP status the API answers with."""
    status_code = 400


class ItemNotFound(InventoryException):
    """Raised when an item id is not in the catalog."""
    status_code = 404

    def __init__(self, item_id: str):
        super().__init__("Product not found")
        self.item_id = item_id


class NotInCart(InventoryException):
    """Raised for remove/update of an item that has no cart line."""

    def __init__(self, item_id: str):
        super().__init__("Item not in cart")
        self.item_id = item_id


class InsufficientStock(InventoryException):
    """Raised when a reservation would take an item's stock below zero."""

    def __init__(self, item_id: str, available: int, requested: int):
        super().__init__(f"Insufficient stock. Available={available}")
        self.item_id = item_id
        self.available = available
        self.requested = requested


class EmptyCart(InventoryException):
    """Raised on checkout of a cart with no lines."""

    def __init__(self):
        super().__init__("Cart is empty")


class InvalidQuantity(InventoryException):
    """Raised for a non-positive cart quantity."""

    def __init__(self, quantity: int):
        super().__init__("Quantity must be positive")
        self.quantity = quantity


class StoreBusy(InventoryException):
    """Raised when the store lock could not be acquired in time; nothing was changed."""
    status_code = 503
