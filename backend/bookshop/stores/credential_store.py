# bookshop/stores/credential_store.py
from bookshop.models.user import User
from bookshop.stores.base import translate_orm_errors


class CredentialStore:
    """Data access for the ``users`` collection. No validation happens here."""

    async def find_by_email(self, email: str) -> User | None:
        with translate_orm_errors("users.find_by_email"):
            return await User.get_or_none(email=email)

    async def create(self, name: str, email: str, password_hash: str) -> User:
        """
        Insert a user record.

        Raises:
            StoreConflict: the email is already taken (unique index)
            StoreError: any other database failure
        """
        with translate_orm_errors("users.create"):
            return await User.create(name=name, email=email, password=password_hash)
