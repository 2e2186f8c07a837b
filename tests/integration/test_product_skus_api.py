import uuid

from .helpers import create_product


def _create_sku(client, product_id, name="Gold / 18", images=None):
    body = {"product_id": product_id, "name": name}
    if images is not None:
        body["images"] = images
    return client.post("/product-skus", json=body)


def test_sku_lifecycle(client):
    product = create_product(client)
    r = _create_sku(client, product["id"], images=["https://cdn.example.com/g18.jpg"])
    assert r.status_code == 201
    sku = r.json()["data"]
    assert sku["images"] == ["https://cdn.example.com/g18.jpg"]

    r = client.patch(f"/product-skus/{sku['id']}", json={"name": "Gold / 20"})
    assert r.json()["data"]["name"] == "Gold / 20"

    assert client.get(f"/product-skus/{sku['id']}").status_code == 200
    assert client.delete(f"/product-skus/{sku['id']}").status_code == 204
    assert client.get(f"/product-skus/{sku['id']}").status_code == 404


def test_sku_for_unknown_product(client):
    missing = uuid.uuid4()
    r = _create_sku(client, str(missing))
    assert r.status_code == 400
    assert r.json() == {"error": f"Product with id {missing} not found", "code": "VALIDATION_ERROR"}


def test_skus_by_product(client):
    ring = create_product(client, name="Ring")
    chain = create_product(client, name="Chain")
    _create_sku(client, ring["id"], name="Gold")
    _create_sku(client, ring["id"], name="Silver")
    _create_sku(client, chain["id"], name="45cm")

    r = client.get(f"/product-skus/product/{ring['id']}")
    assert r.status_code == 200
    assert sorted(s["name"] for s in r.json()["data"]) == ["Gold", "Silver"]

    assert client.get("/product-skus").json()["meta"]["total"] == 3


def test_deleting_product_removes_its_skus(client):
    ring = create_product(client)
    _create_sku(client, ring["id"])
    assert client.delete(f"/products/{ring['id']}").status_code == 204
    assert client.get("/product-skus").json()["meta"]["total"] == 0
