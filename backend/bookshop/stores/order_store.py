# bookshop/stores/order_store.py
import uuid
from typing import Any

from bookshop.models.order import Order
from bookshop.stores.base import translate_orm_errors


class OrderStore:
    """Data access for the ``pedidos`` collection."""

    async def create(self, user_id: uuid.UUID, date: str, items: Any) -> Order:
        with translate_orm_errors("pedidos.create"):
            return await Order.create(user_id=user_id, date=date, items=items)

    async def list_by_user_id(self, user_id: uuid.UUID) -> list[Order]:
        # No order_by: results come back in whatever order the database yields
        with translate_orm_errors("pedidos.list_by_user_id"):
            return await Order.filter(user_id=user_id)
