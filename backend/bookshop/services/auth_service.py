# bookshop/services/auth_service.py
"""
Registration and login.

Registration turns a password into an Argon2 hash stored next to the user's
email; login verifies it and hands out the user's bearer token, reusing the
session the user already has.
"""
import logging
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from bookshop.core.errors import (
    DuplicateEmail,
    InvalidCredentials,
    StoreConflict,
    ValidationFailed,
)
from bookshop.core.security import hash_password, new_session_token, verify_password
from bookshop.schemas.auth import SignUpIn
from bookshop.stores import CredentialStore, SessionStore

logger = logging.getLogger("uvicorn.error")


@dataclass(frozen=True)
class LoginResult:
    display_name: str
    token: str


def _format_errors(exc: ValidationError) -> list[str]:
    messages = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "body"
        messages.append(f'"{field}" {err["msg"]}')
    return messages


class AuthService:
    def __init__(self, users: CredentialStore, sessions: SessionStore):
        self.users = users
        self.sessions = sessions

    async def register(self, name: Any, email: Any, password: Any) -> None:
        """
        Create a user account.

        The duplicate check runs before validation, so a registered email is
        reported as a conflict whatever the other fields hold.

        Raises:
            DuplicateEmail: the email is already registered
            ValidationFailed: one or more field rules failed (all are listed)
            StoreError: the database failed
        """
        if isinstance(email, str) and await self.users.find_by_email(email):
            raise DuplicateEmail(email)

        try:
            data = SignUpIn(name=name, email=email, password=password)
        except ValidationError as e:
            raise ValidationFailed(_format_errors(e)) from e

        try:
            # Raw email, not the normalized one: lookups use the submitted string
            await self.users.create(data.name, email, hash_password(data.password))
        except StoreConflict as e:
            # Lost a race against a concurrent sign-up with the same email
            raise DuplicateEmail(email) from e
        logger.info("[auth] registered user email=%s", email)

    async def login(self, email: Any, password: Any) -> LoginResult:
        """
        Check credentials and return the user's bearer token.

        Unknown email and wrong password both raise ``InvalidCredentials``.
        A user who already has a session gets the same token back.
        """
        if not isinstance(email, str) or not isinstance(password, str):
            raise InvalidCredentials()

        user = await self.users.find_by_email(email)
        if not user or not verify_password(password, user.password):
            raise InvalidCredentials()

        session = await self.sessions.find_by_user_id(user.id)
        if session:
            return LoginResult(display_name=user.name, token=session.token)

        try:
            session = await self.sessions.create(new_session_token(), user.id)
        except StoreConflict:
            # A concurrent first login inserted the user's session first
            session = await self.sessions.find_by_user_id(user.id)
            if session is None:
                raise
        return LoginResult(display_name=user.name, token=session.token)
