from teeshop.config import settings
from teeshop.db import get_db
from teeshop.exceptions import InventoryException
from teeshop.schemas.item_schema import (
    CartItemIn,
    CartPage,
    CheckoutOut,
    MessageOut,
    RemoveItemIn,
)
from teeshop.services.cart_service import CartService
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

router = APIRouter(prefix="/cart", tags=["cart"])


@router.post("/add", summary="Add item to cart", response_model=MessageOut)
def add_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = CartService(db)
    try:
        svc.add(payload.product_id, payload.quantity)
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return {"message": "Item added to cart"}


@router.post("/remove", summary="Remove item from cart", response_model=MessageOut)
def remove_item(payload: RemoveItemIn, db: Session = Depends(get_db)):
    svc = CartService(db)
    try:
        svc.remove(payload.product_id)
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return {"message": "Item removed from cart"}


@router.post("/update", summary="Set the quantity of a cart line", response_model=MessageOut)
def update_item(payload: CartItemIn, db: Session = Depends(get_db)):
    svc = CartService(db)
    try:
        svc.update(payload.product_id, payload.quantity)
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return {"message": "Cart updated"}


@router.get("/list", summary="Get cart", response_model=CartPage)
def list_cart(
    offset: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    db: Session = Depends(get_db),
):
    svc = CartService(db)
    try:
        lines, total = svc.list(offset=offset, limit=limit)
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return CartPage(items=lines, total=total)


@router.post("/checkout", summary="Check out the cart", response_model=CheckoutOut)
def checkout(db: Session = Depends(get_db)):
    """
    Sums the cart at current prices, returns a fresh order id and empties the
    cart. Reserved stock stays sold.
    """
    svc = CartService(db)
    try:
        return svc.checkout()
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
