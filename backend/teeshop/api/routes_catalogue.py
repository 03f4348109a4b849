from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
from sqlalchemy.orm import Session
from teeshop.config import settings
from teeshop.db import get_db
from teeshop.exceptions import InventoryException
from teeshop.schemas.item_schema import ItemFilter, ItemOut, ItemPage, Size
from teeshop.services.inventory_service import InventoryService

router = APIRouter(tags=["catalogue"])

@router.get("/list", summary="List products", response_model=ItemPage)
def list_products(
    name: Optional[str] = Query(None, description="case-insensitive substring of the name"),
    color: Optional[str] = Query(None, description="case-insensitive exact colour"),
    size: Optional[Size] = Query(None),
    price: Optional[float] = Query(None, ge=0, allow_inf_nan=False, description="maximum price, inclusive"),
    offset: int = Query(0, ge=0),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT),
    db: Session = Depends(get_db),
):
    svc = InventoryService(db)
    filters = ItemFilter(name=name, color=color, size=size, price=price)
    try:
        items, total = svc.list(filters, offset=offset, limit=limit)
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    return ItemPage(items=items, total=total)

@router.get("/{item_id}", summary="Get product by id", response_model=ItemOut)
def get_product(item_id: str, db: Session = Depends(get_db)):
    svc = InventoryService(db)
    try:
        return svc.get(item_id)
    except InventoryException as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
