# bookshop/schemas/auth.py
"""
Pydantic schemas for authentication endpoints.
Defines the sign-up rules and the sign-in response.
"""
from pydantic import BaseModel, EmailStr, Field

class SignUpIn(BaseModel):
    """
    Registration input.
    All field rules are checked together so a bad request reports every
    violation at once.
    """
    name: str = Field(min_length=3, max_length=100)  # Display name
    email: EmailStr  # Login email, must be unique
    password: str = Field(min_length=6)  # Plain text, hashed before storage

class SignInOut(BaseModel):
    """
    Response model for successful sign-in.
    """
    user: str  # Display name of the signed-in user
    token: str  # Bearer token for the Authorization header
