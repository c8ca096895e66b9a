# bookshop/services/session_guard.py
import uuid

from bookshop.core.errors import SessionExpired, Unauthenticated
from bookshop.core.security import extract_bearer_token
from bookshop.stores import SessionStore


class SessionGuard:
    """
    Resolves an ``Authorization`` header to the id of the signed-in user.

    Pure lookup: sessions carry no expiry, so a token is valid for as long as
    its session row exists.
    """

    def __init__(self, sessions: SessionStore):
        self.sessions = sessions

    async def resolve(self, authorization: str | None) -> uuid.UUID:
        """
        Raises:
            Unauthenticated: no header, or no token after "Bearer "
            SessionExpired: the token matches no session
        """
        token = extract_bearer_token(authorization)
        if not token:
            raise Unauthenticated()
        session = await self.sessions.find_by_token(token)
        if not session:
            raise SessionExpired()
        return session.user_id
