# bookshop/api/v1/routers/orders.py
import uuid

from fastapi import APIRouter, Depends, Response, status

from bookshop.api.v1.deps import get_current_user_id, get_services
from bookshop.core.container import Services
from bookshop.schemas.order import OrderIn, OrderOut

router = APIRouter(tags=["orders"])

@router.post("/pedidos")
async def create_order(
    body: OrderIn,
    user_id: uuid.UUID = Depends(get_current_user_id),
    services: Services = Depends(get_services),
):
    """
    Place an order for the authenticated user.

    The cart in ``carrinho`` is stored as sent, stamped with today's date.

    Raises:
        HTTPException (401): Missing token or no matching session
    """
    await services.orders.submit(user_id, body.carrinho)
    return Response(status_code=status.HTTP_200_OK)

@router.get("/meus-pedidos", response_model=list[OrderOut])
async def list_my_orders(
    user_id: uuid.UUID = Depends(get_current_user_id),
    services: Services = Depends(get_services),
):
    """
    List every order placed by the authenticated user.

    Returns:
        list[OrderOut]: orders in the order the database returns them

    Raises:
        HTTPException (401): Missing token or no matching session
    """
    rows = await services.orders.list_for_user(user_id)
    return [
        OrderOut(id=str(o.id), userId=str(o.user_id), date=o.date, pedido=o.items)
        for o in rows
    ]
