from teeshop.adapters.mock_catalog import MIN_ITEMS, MockCatalogAdapter, seed_catalog
from teeshop.db import init_db
from teeshop.schemas.item_schema import Size
from teeshop.services.inventory_service import InventoryService


def test_generated_items_satisfy_item_rules():
    sizes = {s.value for s in Size}
    rows = list(MockCatalogAdapter(seed=3).generate(200))
    assert len({r["id"] for r in rows}) == 200
    for r in rows:
        assert r["name"].endswith(" T-shirt")
        assert r["color"]
        assert r["size"] in sizes
        assert 1000 <= r["price_cents"] <= 10000
        assert 0 <= r["stock"] <= 100


def test_seeded_generation_is_reproducible():
    a = list(MockCatalogAdapter(seed=11).generate(5))
    b = list(MockCatalogAdapter(seed=11).generate(5))
    assert a == b


def test_seed_catalog_fills_empty_store_once(db):
    init_db(reset=True)
    assert seed_catalog(5, seed=1) == MIN_ITEMS
    assert InventoryService(db).count() == MIN_ITEMS
    assert seed_catalog(5, seed=1) == 0
    assert InventoryService(db).count() == MIN_ITEMS
