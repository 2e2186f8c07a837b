"""Small request builders shared by the API tests."""


def create_user(client, email="ana@example.com", **overrides):
    body = {"name": "Ana Souza", "email": email, "cellphone": "11987654321"}
    body.update(overrides)
    r = client.post("/users", json=body)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def create_product(client, name="Ring", price="19.99", **overrides):
    body = {"name": name, "price": price}
    body.update(overrides)
    r = client.post("/products", json=body)
    assert r.status_code == 201, r.text
    return r.json()["data"]


def create_order(client, user_id, items):
    r = client.post("/orders", json={"user_id": user_id, "items": items})
    assert r.status_code == 201, r.text
    return r.json()["data"]
