from typing import Dict, Iterator, Optional

from faker import Faker

from teeshop.db import SessionLocal
from teeshop.repositories.item_repo import ItemRepository
from teeshop.schemas.item_schema import Size
from teeshop.utils.log import get_logger
from teeshop.utils.transactions import locked_transaction

log = get_logger("startup")

ADJECTIVES = [
    "Classic", "Vintage", "Oversized", "Slim", "Organic", "Heavyweight",
    "Striped", "Graphic", "Relaxed", "Cropped", "Ringer", "Pocket",
    "Washed", "Tie-Dye", "Essential", "Premium",
]

MIN_ITEMS = 100


class MockCatalogAdapter:
    """
    Generates plausible T-shirt items for the in-memory catalog.

    Every generated row satisfies the Item invariants: a size from Size,
    a price between 10.00 and 100.00 (held in cents) and stock in 0..100.
    Pass `seed` for a reproducible catalog.
    """

    def __init__(self, seed: Optional[int] = None):
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def item(self) -> Dict:
        return {
            "id": self.fake.uuid4(),
            "name": f"{self.fake.random_element(ADJECTIVES)} T-shirt",
            "color": self.fake.safe_color_name(),
            "size": self.fake.random_element([s.value for s in Size]),
            "price_cents": self.fake.random_int(min=1000, max=10000),
            "stock": self.fake.random_int(min=0, max=100),
        }

    def generate(self, count: int) -> Iterator[Dict]:
        for _ in range(count):
            yield self.item()


def seed_catalog(count: int, seed: Optional[int] = None) -> int:
    """
    Load `count` generated items (at least MIN_ITEMS) into an empty catalog.
    Returns the number of items created; an already populated catalog is left alone.
    """
    count = max(count, MIN_ITEMS)
    db = SessionLocal()
    try:
        repo = ItemRepository(db)
        with locked_transaction(db):
            if repo.count():
                log.info("seed_catalog(): catalog already populated, skipping")
                return 0
            created = repo.bulk_create(MockCatalogAdapter(seed).generate(count))
        log.info(f"seed_catalog(): generated {created} items")
        return created
    finally:
        db.close()
