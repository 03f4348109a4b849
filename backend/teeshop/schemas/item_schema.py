# backend/teeshop/schemas/item_schema.py
import enum
from typing import List, Optional
from pydantic import BaseModel, Field
from pydantic import ConfigDict


class Size(str, enum.Enum):
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"


class ItemOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    name: str
    color: str
    size: Size
    price: float
    stock: int


class ItemFilter(BaseModel):
    """Catalog filters; every field is optional and the supplied ones are ANDed."""
    name: Optional[str] = None
    color: Optional[str] = None
    size: Optional[Size] = None
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


class ItemPage(BaseModel):
    items: List[ItemOut]
    total: int


class CartLineOut(BaseModel):
    product: ItemOut
    quantity: int


class CartPage(BaseModel):
    items: List[CartLineOut]
    total: int


class CartItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    product_id: str = Field(..., alias="productId")
    quantity: int = Field(..., ge=1)


class RemoveItemIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    product_id: str = Field(..., alias="productId")


class CheckoutOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    order_id: str = Field(..., alias="orderId")
    total: float


class MessageOut(BaseModel):
    message: str
