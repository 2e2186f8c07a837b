import uuid
from decimal import Decimal

import pytest

from storefront.db import schemas
from storefront.errors import NotFoundError, ValidationError
from storefront.services.order_service import OrderService
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository


@pytest.fixture
def users():
    return FakeUserRepository()


@pytest.fixture
def products():
    return FakeProductRepository()


@pytest.fixture
def orders():
    return FakeOrderRepository()


@pytest.fixture
def service(orders, users, products):
    return OrderService(orders, users, products)


@pytest.fixture
def buyer(users):
    return users.add(name="Ana", email="ana@example.com", cellphone="11987654321")


class TestCreateOrder:
    """Order creation: buyer and product checks plus the money arithmetic."""

    def test_totals_are_sum_of_subtotals(self, service, buyer, products):
        ring = products.add(name="Ring", price="19.99")
        chain = products.add(name="Chain", price="0.10")

        order = service.create_order(
            schemas.OrderCreate(
                user_id=buyer.id,
                items=[
                    {"product_id": ring.id, "quantity": 3},
                    {"product_id": chain.id, "quantity": 7},
                ],
            )
        )

        subtotals = {item.product_name: item.subtotal for item in order.items}
        assert subtotals == {"Ring": Decimal("59.97"), "Chain": Decimal("0.70")}
        assert order.total == Decimal("60.67")
        assert order.status == "pending"

    def test_price_snapshot_taken_at_order_time(self, service, buyer, products):
        ring = products.add(name="Ring", price="10.00")
        order = service.create_order(
            schemas.OrderCreate(user_id=buyer.id, items=[{"product_id": ring.id, "quantity": 1}])
        )
        ring.price = Decimal("99.00")

        assert order.items[0].price_at_order == Decimal("10.00")
        assert order.total == Decimal("10.00")

    def test_same_product_on_two_lines(self, service, buyer, products):
        ring = products.add(name="Ring", price="5.00")
        order = service.create_order(
            schemas.OrderCreate(
                user_id=buyer.id,
                items=[{"product_id": ring.id, "quantity": 1}, {"product_id": ring.id, "quantity": 2}],
            )
        )
        assert len(order.items) == 2
        assert order.total == Decimal("15.00")

    def test_no_items(self, service, buyer):
        data = schemas.OrderCreate.model_construct(user_id=buyer.id, items=[])
        with pytest.raises(ValidationError, match="Order must have at least one item"):
            service.create_order(data)

    def test_unknown_user(self, service, products):
        ring = products.add(name="Ring", price="5.00")
        missing = uuid.uuid4()
        with pytest.raises(NotFoundError, match=f"User with id {missing} not found"):
            service.create_order(
                schemas.OrderCreate(user_id=missing, items=[{"product_id": ring.id, "quantity": 1}])
            )

    def test_unknown_products_listed_once(self, service, buyer, products, orders):
        ring = products.add(name="Ring", price="5.00")
        missing = uuid.uuid4()
        with pytest.raises(NotFoundError) as exc:
            service.create_order(
                schemas.OrderCreate(
                    user_id=buyer.id,
                    items=[
                        {"product_id": ring.id, "quantity": 1},
                        {"product_id": missing, "quantity": 1},
                        {"product_id": missing, "quantity": 2},
                    ],
                )
            )
        assert exc.value.message == f"Products not found: {missing}"
        assert orders.items == []

    def test_non_positive_quantity(self, service, buyer, products):
        ring = products.add(name="Ring", price="5.00")
        item = schemas.OrderItemCreate.model_construct(product_id=ring.id, quantity=0)
        data = schemas.OrderCreate.model_construct(user_id=buyer.id, items=[item])
        with pytest.raises(ValidationError, match="Quantity must be greater than 0 for product Ring"):
            service.create_order(data)


class TestUpdateAndDelete:
    def test_update_status(self, service, orders, buyer):
        order = orders.create_with_items(buyer.id, Decimal("1.00"), [])
        updated = service.update_order(order.id, schemas.OrderUpdate(status="shipped"))
        assert updated.status == "shipped"

    def test_unknown_status_rejected(self, service, orders, buyer):
        order = orders.create_with_items(buyer.id, Decimal("1.00"), [])
        data = schemas.OrderUpdate.model_construct(status="lost")
        with pytest.raises(ValidationError, match="Invalid order status: lost"):
            service.update_order(order.id, data)

    @pytest.mark.parametrize("status", ["pending", "cancelled"])
    def test_delete_allowed(self, service, orders, buyer, status):
        order = orders.create_with_items(buyer.id, Decimal("1.00"), [])
        order.status = status
        service.delete_order(order.id)
        assert orders.items == []

    @pytest.mark.parametrize("status", ["confirmed", "shipped", "delivered"])
    def test_delete_refused(self, service, orders, buyer, status):
        order = orders.create_with_items(buyer.id, Decimal("1.00"), [])
        order.status = status
        with pytest.raises(ValidationError) as exc:
            service.delete_order(order.id)
        assert exc.value.message == (
            f"Cannot delete order with status {status}. Only pending or cancelled orders can be deleted."
        )

    def test_delete_missing(self, service):
        with pytest.raises(NotFoundError):
            service.delete_order(uuid.uuid4())


def test_orders_by_user_paginated(service, orders, buyer):
    other = uuid.uuid4()
    for _ in range(3):
        orders.create_with_items(buyer.id, Decimal("1.00"), [])
    orders.create_with_items(other, Decimal("1.00"), [])

    page = service.get_orders_by_user_id(buyer.id, page=1, limit=2)

    assert len(page["data"]) == 2
    assert page["meta"]["total"] == 3
    assert page["meta"]["total_pages"] == 2
