# bookshop/services/order_service.py
import datetime as dt
import uuid
from typing import Any, Callable

from bookshop.models.order import Order
from bookshop.stores import OrderStore

DATE_FORMAT = "%d/%m/%Y"


class OrderService:
    """
    Places and lists orders for an already authenticated user.

    ``today`` supplies the current date; tests pass a fixed one.
    """

    def __init__(self, orders: OrderStore, today: Callable[[], dt.date] = dt.date.today):
        self.orders = orders
        self.today = today

    async def submit(self, user_id: uuid.UUID, cart: Any) -> None:
        await self.orders.create(user_id, self.today().strftime(DATE_FORMAT), cart)

    async def list_for_user(self, user_id: uuid.UUID) -> list[Order]:
        return await self.orders.list_by_user_id(user_id)
