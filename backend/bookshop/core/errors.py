# bookshop/core/errors.py
"""
Domain errors raised by the stores and services.
The HTTP layer translates them to status codes; nothing below the routers
knows about HTTP.
"""


class BookshopError(Exception):
    """Base class for every error raised by this package."""


class StoreError(BookshopError):
    """The underlying database failed to read or write."""


class StoreConflict(StoreError):
    """A write was rejected by a unique index."""


class ValidationFailed(BookshopError):
    """Registration input broke one or more field rules."""

    def __init__(self, messages: list[str]):
        super().__init__("; ".join(messages))
        self.messages = messages


class DuplicateEmail(BookshopError):
    """An account with this email already exists."""


class InvalidCredentials(BookshopError):
    """Unknown email or wrong password (deliberately not told apart)."""


class Unauthenticated(BookshopError):
    """No bearer token was presented."""


class SessionExpired(BookshopError):
    """The bearer token does not belong to any session."""
