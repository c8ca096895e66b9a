# bookshop/core/security.py
"""
Security module for authentication.
Handles password hashing and bearer token generation.
"""
import uuid
from passlib.context import CryptContext

# Password hashing context
# Argon2 is a modern, salted, memory-hard password hashing algorithm;
# default parameters cost a few tens of milliseconds per hash
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from database

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)

def new_session_token() -> str:
    """Random, unguessable bearer token for a new session."""
    return str(uuid.uuid4())

def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Pull the token out of an ``Authorization: Bearer <token>`` header value.

    Returns None when the header is absent, uses another scheme, or carries
    an empty token.
    """
    if not authorization or not authorization.lower().startswith("bearer "):
        return None
    token = authorization.split(" ", 1)[1].strip()
    return token or None
