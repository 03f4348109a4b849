import yaml
from fastapi.testclient import TestClient

from teeshop.main import app

client = TestClient(app)


def test_api_spec_yaml():
    res = client.get("/api-spec.yaml")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/yaml")
    spec = yaml.safe_load(res.text)
    assert spec["openapi"].startswith("3.")
    assert spec["info"]["title"] == "T-shirt Store API"
    for path in ("/product/list", "/product/{item_id}", "/cart/add", "/cart/remove",
                 "/cart/update", "/cart/list", "/cart/checkout"):
        assert path in spec["paths"]
    assert "/api-spec.yaml" not in spec["paths"]


def test_api_spec_describes_cart_body():
    spec = yaml.safe_load(client.get("/api-spec.yaml").text)
    schema = spec["components"]["schemas"]["CartItemIn"]
    assert schema["required"] == ["productId", "quantity"]
    assert schema["properties"]["quantity"]["minimum"] == 1


def test_docs_ui():
    res = client.get("/api-docs")
    assert res.status_code == 200
    assert "swagger" in res.text.lower()
