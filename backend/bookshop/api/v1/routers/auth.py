# bookshop/api/v1/routers/auth.py
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from bookshop.api.v1.deps import get_services
from bookshop.core.container import Services
from bookshop.core.errors import DuplicateEmail, InvalidCredentials, ValidationFailed
from bookshop.schemas.auth import SignInOut

router = APIRouter(tags=["auth"])
logger = logging.getLogger("uvicorn.error")

def _as_object(body: Any) -> dict:
    # A missing or non-object body carries no fields; the rules then report each one
    return body if isinstance(body, dict) else {}

@router.post("/sign-up", status_code=status.HTTP_201_CREATED)
async def sign_up(body: Any = Body(default=None), services: Services = Depends(get_services)):
    """
    Register a new user account.

    Args:
        body: Request body containing:
            - name: str (3-100 characters)
            - email: str (valid address, must be unique)
            - password: str (at least 6 characters, hashed before storage)

    Returns:
        Empty 201 response once the user is stored.

    Raises:
        HTTPException (409): Email already registered (EMAIL_EXISTS)

    Note:
        Validation failures answer 400 with a JSON array holding one message
        per broken rule, including a missing or non-object body.
    """
    try:
        fields = _as_object(body)
        await services.auth.register(fields.get("name"), fields.get("email"), fields.get("password"))
    except DuplicateEmail:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                            detail={"code": "EMAIL_EXISTS", "message": "Email already registered"})
    except ValidationFailed as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=e.messages)
    return Response(status_code=status.HTTP_201_CREATED)

@router.post("/sign-in", response_model=SignInOut)
async def sign_in(body: Any = Body(default=None), services: Services = Depends(get_services)):
    """
    Authenticate a user and return their bearer token.

    The first successful sign-in opens a session; later sign-ins return the
    same token.

    Args:
        body: Request body containing email and password

    Returns:
        SignInOut: display name under ``user`` and the bearer ``token``

    Raises:
        HTTPException (401): Unknown email or wrong password (AUTH_INVALID_CREDENTIALS)
    """
    try:
        fields = _as_object(body)
        result = await services.auth.login(fields.get("email"), fields.get("password"))
    except InvalidCredentials:
        logger.info("[auth] rejected sign-in")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED,
                            detail={"code": "AUTH_INVALID_CREDENTIALS", "message": "Incorrect email or password"})
    return SignInOut(user=result.display_name, token=result.token)
