"""
Services Module

Application logic on top of the stores:
- Auth: registration and login with session reuse
- Session guard: bearer token to user id
- Orders: submit and list per user
"""

from .auth_service import AuthService, LoginResult
from .session_guard import SessionGuard
from .order_service import OrderService

__all__ = [
    "AuthService",
    "LoginResult",
    "SessionGuard",
    "OrderService",
]
