import pytest

from teeshop.db import SessionLocal, init_db
from teeshop.models.item import Item

# id, name, color, size, price_cents, stock
CATALOG = [
    ("X", "Classic T-shirt", "Navy", "M", 999, 5),
    ("Y", "Vintage T-shirt", "navy", "L", 1999, 10),
    ("Z", "Graphic Tee", "Red", "M", 2500, 0),
    ("P", "100% Cotton Tee", "Red", "S", 1000, 1),
]


def seed_items(rows=CATALOG):
    db = SessionLocal()
    try:
        for item_id, name, color, size, price_cents, stock in rows:
            db.add(
                Item(
                    id=item_id,
                    name=name,
                    color=color,
                    size=size,
                    price_cents=price_cents,
                    stock=stock,
                )
            )
        db.commit()
    finally:
        db.close()


@pytest.fixture(autouse=True)
def reset_store():
    init_db(reset=True)
    seed_items()
    yield


@pytest.fixture
def db():
    s = SessionLocal()
    try:
        yield s
    finally:
        s.close()
