# bookshop/models/order.py
import uuid
from tortoise import fields, models

class Order(models.Model):
    id = fields.UUIDField(pk=True, default=uuid.uuid4)
    user_id = fields.UUIDField(index=True)   # Who placed the order
    date = fields.CharField(max_length=10)   # DD/MM/YYYY, day the order was placed
    items = fields.JSONField(null=True)      # Cart payload as sent by the client, shape not checked
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "pedidos"
