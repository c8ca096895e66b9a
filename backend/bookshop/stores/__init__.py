"""
Data-access wrappers, one per collection.
Each store is constructed once at startup and handed to the services.
"""
from .credential_store import CredentialStore
from .session_store import SessionStore
from .order_store import OrderStore

__all__ = ["CredentialStore", "SessionStore", "OrderStore"]
