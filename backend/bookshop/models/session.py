# bookshop/models/session.py
import uuid
from tortoise import fields, models

class Session(models.Model):
    """
    Login session: binds an opaque bearer token to a user id.

    ``user_id`` is a plain reference, not a foreign key; the session does not
    own the user. It is unique so a user can hold at most one session.
    Sessions never expire.
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    token = fields.CharField(max_length=64, unique=True, index=True)
    user_id = fields.UUIDField(unique=True, index=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "sessions"
