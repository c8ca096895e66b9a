# bookshop/stores/session_store.py
import uuid

from bookshop.models.session import Session
from bookshop.stores.base import translate_orm_errors


class SessionStore:
    """Data access for the ``sessions`` collection."""

    async def find_by_token(self, token: str) -> Session | None:
        with translate_orm_errors("sessions.find_by_token"):
            return await Session.get_or_none(token=token)

    async def find_by_user_id(self, user_id: uuid.UUID) -> Session | None:
        with translate_orm_errors("sessions.find_by_user_id"):
            return await Session.get_or_none(user_id=user_id)

    async def create(self, token: str, user_id: uuid.UUID) -> Session:
        """Raises StoreConflict if the user already has a session or the token is taken."""
        with translate_orm_errors("sessions.create"):
            return await Session.create(token=token, user_id=user_id)
