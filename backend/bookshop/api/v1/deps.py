# bookshop/api/v1/deps.py
import uuid

from fastapi import Depends, Header, HTTPException, Request, status

from bookshop.core.container import Services
from bookshop.core.errors import SessionExpired, Unauthenticated

def get_services(request: Request) -> Services:
    """
    FastAPI dependency returning the services wired at startup.

    Tests replace ``app.state.services`` to run the routes against their own
    stores.
    """
    return request.app.state.services

async def get_current_user_id(
    authorization: str | None = Header(default=None),
    services: Services = Depends(get_services),
) -> uuid.UUID:
    """
    FastAPI dependency resolving the bearer token to the signed-in user's id.

    The token is read from the ``Authorization: Bearer <token>`` header and
    looked up in the sessions collection.

    Raises:
        HTTPException (401): If no token is provided (AUTH_REQUIRED)
        HTTPException (401): If the token has no session (AUTH_SESSION_EXPIRED)

    Usage:
        @router.get("/protected")
        async def protected_route(user_id: uuid.UUID = Depends(get_current_user_id)):
            ...
    """
    try:
        return await services.sessions.resolve(authorization)
    except Unauthenticated:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="AUTH_REQUIRED")
    except SessionExpired:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_SESSION_EXPIRED",
                                    "message": "Session expired, please sign in again"})
