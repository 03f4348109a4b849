from teeshop.db import SessionLocal
from teeshop.exceptions import StoreBusy
from teeshop.repositories.cart_repo import CartRepository
from teeshop.repositories.item_repo import ItemRepository
from teeshop.utils.log import get_logger
from teeshop.utils.transactions import locked_transaction
from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

router = APIRouter()
log = get_logger("api")


@router.get("/health", tags=["health"])
def health():
    db_ok = False
    items = None
    cart_lines = None
    db = SessionLocal()
    try:
        with locked_transaction(db):
            db.execute(text("SELECT 1"))
            items = ItemRepository(db).count()
            cart_lines = CartRepository(db).count()
            db_ok = True
    except (SQLAlchemyError, StoreBusy) as e:
        log.warning(f"health(): store check failed: {e}")
        db_ok = False
    finally:
        db.close()

    return {
        "status": "ok" if db_ok and items else "degraded",
        "db": db_ok,
        "items": items,
        "cart_lines": cart_lines,
    }
