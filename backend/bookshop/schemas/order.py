# bookshop/schemas/order.py
"""
Pydantic schemas for order endpoints.
"""
from typing import Any
from pydantic import BaseModel

class OrderIn(BaseModel):
    """Order submission body. The cart shape belongs to the client."""
    carrinho: Any = None

class OrderOut(BaseModel):
    """
    A stored order as returned by the history endpoint.
    """
    id: str  # Order unique identifier
    userId: str  # Owner of the order
    date: str  # DD/MM/YYYY
    pedido: Any = None  # Cart payload exactly as submitted
