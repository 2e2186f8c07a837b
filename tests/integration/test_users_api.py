import uuid

import pytest

from .helpers import create_user


def test_create_and_get_user(client):
    created = create_user(client, birthday="1990-05-17", cpf="123.456.789-09")
    assert created["email"] == "ana@example.com"
    assert created["birthday"] == "1990-05-17"

    r = client.get(f"/users/{created['id']}")
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Ana Souza"


def test_list_users_paginated(client):
    for i in range(3):
        create_user(client, email=f"user{i}@example.com")

    r = client.get("/users", params={"page": 2, "limit": 2})
    assert r.status_code == 200
    body = r.json()
    assert len(body["data"]) == 1
    assert body["meta"] == {"page": 2, "limit": 2, "total": 3, "total_pages": 2}


def test_list_users_defaults(client):
    body = client.get("/users").json()
    assert body["meta"] == {"page": 1, "limit": 10, "total": 0, "total_pages": 0}


def test_pagination_bounds(client):
    assert client.get("/users", params={"page": 0}).status_code == 422
    assert client.get("/users", params={"limit": 101}).status_code == 422
    assert client.get("/users", params={"limit": 0}).status_code == 422


def test_schema_violations_are_422(client):
    r = client.post("/users", json={"name": "Ana", "email": "not-an-email", "cellphone": "11987654321"})
    assert r.status_code == 422
    r = client.post("/users", json={"name": "Ana", "email": "ana@example.com", "cellphone": "123"})
    assert r.status_code == 422


def test_business_rule_violation_is_400(client):
    r = client.post("/users", json={"name": "   ", "email": "ana@example.com", "cellphone": "11987654321"})
    assert r.status_code == 400
    assert r.json() == {"error": "Name cannot be empty", "code": "VALIDATION_ERROR"}


def test_duplicate_email(client):
    create_user(client)
    r = client.post("/users", json={"name": "Other", "email": "ana@example.com", "cellphone": "11987654321"})
    assert r.status_code == 400
    assert r.json()["error"] == "Email already in use"


def test_patch_user(client):
    created = create_user(client)
    r = client.patch(f"/users/{created['id']}", json={"cellphone": "(21) 99999-8888"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["cellphone"] == "(21) 99999-8888"
    assert data["name"] == "Ana Souza"


@pytest.mark.parametrize("field", ["name", "email", "cellphone"])
def test_patch_null_required_field_is_400(client, field):
    created = create_user(client)
    r = client.patch(f"/users/{created['id']}", json={field: None})
    assert r.status_code == 400
    assert r.json() == {"error": f"{field.capitalize()} cannot be null", "code": "VALIDATION_ERROR"}
    assert client.get(f"/users/{created['id']}").json()["data"][field] == created[field]


def test_patch_null_clears_optional_fields(client):
    created = create_user(client)
    client.patch(f"/users/{created['id']}", json={"cpf": "123.456.789-00", "birthday": "1990-05-17"})
    r = client.patch(f"/users/{created['id']}", json={"cpf": None, "birthday": None})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["cpf"] is None
    assert data["birthday"] is None


def test_unknown_user_is_404(client):
    missing = uuid.uuid4()
    r = client.get(f"/users/{missing}")
    assert r.status_code == 404
    assert r.json() == {"error": f"User with id {missing} not found", "code": "NOT_FOUND"}


def test_malformed_id_is_422(client):
    assert client.get("/users/not-a-uuid").status_code == 422


def test_delete_user(client):
    created = create_user(client)
    r = client.delete(f"/users/{created['id']}")
    assert r.status_code == 204
    assert r.content == b""
    assert client.get(f"/users/{created['id']}").status_code == 404
