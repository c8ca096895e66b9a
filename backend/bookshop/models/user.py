# bookshop/models/user.py
"""
Database model for users.
Represents a customer account: display name, login email and password hash.
"""
import uuid
from tortoise import fields, models

class User(models.Model):
    """
    User database model.

    Security:
    - Password is stored as a hash (never store plain text passwords)
    - Email must be unique across all users; the unique index is what
      settles concurrent registrations of the same address
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    name = fields.CharField(max_length=100)  # Display name returned on sign-in
    email = fields.CharField(
        max_length=320,
        unique=True,
        index=True
    )  # Login email (must be unique, indexed for fast lookups)
    password = fields.CharField(max_length=255)  # Argon2 hash, never plain text
    created_at = fields.DatetimeField(auto_now_add=True)  # Timestamp when account was created

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
