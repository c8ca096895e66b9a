import datetime as dt
import uuid

import pytest

from bookshop.services import OrderService


@pytest.fixture
def service(order_store):
    return OrderService(order_store, today=lambda: dt.date(2024, 3, 7))


async def test_submit_stamps_day_month_year(service, order_store):
    user_id = uuid.uuid4()
    await service.submit(user_id, [{"item": "Book A", "qty": 1}])

    [order] = order_store.rows
    assert order.user_id == user_id
    assert order.date == "07/03/2024"
    assert order.items == [{"item": "Book A", "qty": 1}]


async def test_cart_is_stored_as_given(service, order_store):
    cart = {"anything": ["goes", 1, None]}
    await service.submit(uuid.uuid4(), cart)
    assert order_store.rows[0].items == cart


async def test_list_only_returns_own_orders(service):
    mine, theirs = uuid.uuid4(), uuid.uuid4()
    await service.submit(mine, ["a"])
    await service.submit(theirs, ["b"])
    await service.submit(mine, ["c"])

    orders = await service.list_for_user(mine)
    assert [o.items for o in orders] == [["a"], ["c"]]


async def test_list_for_user_without_orders(service):
    assert await service.list_for_user(uuid.uuid4()) == []
