import uuid
from decimal import Decimal
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from storefront.db.repositories import (
    SqlAlchemyHealthRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyProductRepository,
    SqlAlchemyProductSkuRepository,
    SqlAlchemyUserRepository,
)
from storefront.errors import DatabaseError, NotFoundError


@pytest.fixture
def users(db_session):
    return SqlAlchemyUserRepository(db_session)


@pytest.fixture
def products(db_session):
    return SqlAlchemyProductRepository(db_session)


def _user(users, email="ana@example.com"):
    return users.create({"name": "Ana", "email": email, "cellphone": "11987654321"})


class TestUserRepository:
    def test_create_sets_defaults(self, users):
        user = _user(users)
        assert isinstance(user.id, uuid.UUID)
        assert user.created_at is not None
        assert user.updated_at is not None

    def test_find_by_email_and_exists(self, users):
        user = _user(users)
        assert users.find_by_email("ana@example.com").id == user.id
        assert users.find_by_email("nobody@example.com") is None
        assert users.exists(user.id) is True
        assert users.exists(uuid.uuid4()) is False

    def test_find_all_counts_every_row(self, users):
        for i in range(5):
            _user(users, email=f"u{i}@example.com")
        items, total = users.find_all(page=2, limit=2)
        assert total == 5
        assert len(items) == 2

    def test_update_and_delete_missing(self, users):
        with pytest.raises(NotFoundError):
            users.update(uuid.uuid4(), {"name": "X"})
        with pytest.raises(NotFoundError):
            users.delete(uuid.uuid4())

    def test_unique_email_violation_becomes_database_error(self, users, db_session):
        _user(users)
        with pytest.raises(DatabaseError) as exc:
            _user(users)
        assert exc.value.message.startswith("Failed to create user: ")
        # Session is usable again after the rollback
        assert users.find_by_email("ana@example.com") is not None


class TestProductRepository:
    def test_find_by_ids(self, products):
        a = products.create({"name": "A", "price": Decimal("1.00")})
        products.create({"name": "B", "price": Decimal("2.00")})
        found = products.find_by_ids([a.id, uuid.uuid4()])
        assert [p.name for p in found] == ["A"]
        assert products.find_by_ids([]) == []

    def test_image_map_persisted(self, products, db_session):
        p = products.create({"name": "A", "price": Decimal("1.00"), "images": {"480p": "https://x/a.jpg"}})
        products.add_images(p.id, {"720p": "https://x/b.jpg"})
        products.delete_image(p.id, "480p")
        db_session.expire_all()
        assert products.find_by_id(p.id).images == {"720p": "https://x/b.jpg"}


def test_sku_repository(db_session, products):
    skus = SqlAlchemyProductSkuRepository(db_session)
    p = products.create({"name": "A", "price": Decimal("1.00")})
    skus.create({"product_id": p.id, "name": "Gold", "images": ["https://x/g.jpg"]})
    assert skus.product_exists(p.id) is True
    assert skus.product_exists(uuid.uuid4()) is False
    assert [s.name for s in skus.find_by_product_id(p.id)] == ["Gold"]


def test_order_created_with_items_in_one_commit(db_session, users, products):
    orders = SqlAlchemyOrderRepository(db_session)
    user = _user(users)
    p = products.create({"name": "A", "price": Decimal("2.50")})

    order = orders.create_with_items(
        user.id,
        Decimal("5.00"),
        [{"product_id": p.id, "product_name": "A", "quantity": 2, "price_at_order": Decimal("2.50"), "subtotal": Decimal("5.00")}],
    )

    db_session.expire_all()
    fetched = orders.find_by_id(order.id)
    assert fetched.status == "pending"
    assert fetched.total == Decimal("5.00")
    assert [(i.quantity, i.subtotal) for i in fetched.items] == [(2, Decimal("5.00"))]
    items, total = orders.find_by_user_id(user.id, 1, 10)
    assert total == 1


def test_payment_repository(db_session, users):
    payments = SqlAlchemyPaymentRepository(db_session)
    orders = SqlAlchemyOrderRepository(db_session)
    order = orders.create_with_items(_user(users).id, Decimal("1.00"), [])
    assert payments.order_exists(order.id) is True
    assert payments.order_exists(uuid.uuid4()) is False

    payment = payments.create(
        {"order_id": order.id, "type": "pix", "amount": Decimal("1.00"), "status": "pending", "metadata_json": {"a": 1}}
    )
    assert payments.find_by_order_id(order.id)[0].metadata_json == {"a": 1}
    assert payments.find_by_id(payment.id).status == "pending"


def test_health_repository(db_session):
    assert SqlAlchemyHealthRepository(db_session).check_database_connection() >= 0


def test_health_repository_failure(db_session):
    with patch.object(db_session, "execute", side_effect=OperationalError("SELECT 1", {}, Exception("gone"))):
        with pytest.raises(DatabaseError, match="Database connection failed"):
            SqlAlchemyHealthRepository(db_session).check_database_connection()
