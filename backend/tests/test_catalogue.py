from fastapi.testclient import TestClient
from teeshop.main import app

client = TestClient(app)

def test_list_products():
    res = client.get("/product/list")
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 4
    assert [it["id"] for it in body["items"]] == ["X", "Y", "Z", "P"]
    first = body["items"][0]
    assert first == {
        "id": "X",
        "name": "Classic T-shirt",
        "color": "Navy",
        "size": "M",
        "price": 9.99,
        "stock": 5,
    }

def test_list_products_filters():
    res = client.get("/product/list", params={"color": "red", "size": "M"})
    assert res.status_code == 200
    assert [it["id"] for it in res.json()["items"]] == ["Z"]

    res = client.get("/product/list", params={"name": "T-SHIRT", "price": 10})
    assert [it["id"] for it in res.json()["items"]] == ["X"]
    assert res.json()["total"] == 1

def test_list_products_paging():
    res = client.get("/product/list", params={"offset": 3, "limit": 2})
    body = res.json()
    assert [it["id"] for it in body["items"]] == ["P"]
    assert body["total"] == 4

def test_list_products_rejects_bad_query():
    assert client.get("/product/list", params={"size": "XXL"}).status_code == 400
    assert client.get("/product/list", params={"limit": 0}).status_code == 400
    assert client.get("/product/list", params={"limit": 101}).status_code == 400
    assert client.get("/product/list", params={"offset": -1}).status_code == 400
    assert client.get("/product/list", params={"price": -1}).status_code == 400

def test_get_product():
    res = client.get("/product/Y")
    assert res.status_code == 200
    assert res.json()["price"] == 19.99

def test_get_missing_product():
    res = client.get("/product/does-not-exist")
    assert res.status_code == 404
    assert res.json()["detail"] == "Product not found"

def test_list_products_price_bound_above_every_price():
    res = client.get("/product/list", params={"price": "1e19"})
    assert res.status_code == 200
    assert res.json()["total"] == 4

def test_list_products_rejects_non_finite_price():
    for bound in ("inf", "-inf", "nan"):
        res = client.get("/product/list", params={"price": bound})
        assert res.status_code == 400
        assert "price" in res.json()["detail"]
