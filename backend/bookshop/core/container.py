# bookshop/core/container.py
"""
Composition root.
Builds the stores once and injects them into the services; the HTTP layer
reaches the result through ``app.state.services``.
"""
from dataclasses import dataclass

from bookshop.services import AuthService, OrderService, SessionGuard
from bookshop.stores import CredentialStore, OrderStore, SessionStore


@dataclass
class Services:
    auth: AuthService
    sessions: SessionGuard
    orders: OrderService


def build_services(
    users: CredentialStore | None = None,
    sessions: SessionStore | None = None,
    orders: OrderStore | None = None,
) -> Services:
    """Wire the services; pass a store to replace the database-backed default."""
    users = users or CredentialStore()
    sessions = sessions or SessionStore()
    orders = orders or OrderStore()
    return Services(
        auth=AuthService(users, sessions),
        sessions=SessionGuard(sessions),
        orders=OrderService(orders),
    )
