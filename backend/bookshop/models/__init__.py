# bookshop/models/__init__.py
"""
Database models module initialization.
Exports all database models for convenient imports throughout the application.

Models exported:
- User: customer account and credentials (users)
- Session: bearer token bound to a user (sessions)
- Order: a submitted cart (pedidos)
"""
from .user import User
from .session import Session
from .order import Order
