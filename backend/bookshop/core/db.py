# bookshop/core/db.py
"""
Database configuration and initialization module.
Handles Tortoise ORM setup, database connection, and migration configuration.
"""
import logging
from tortoise import Tortoise

from bookshop.config import settings

logger = logging.getLogger("uvicorn.error")

# Database connection URL, overridable through DATABASE_URL
DB_URL = settings.database_url

# Tortoise ORM configuration dictionary
# This configuration is also used by Aerich for database migrations
TORTOISE_ORM = {
    "connections": {"default": DB_URL},
    "apps": {
        "models": {
            "models": [
                "bookshop.models.user",      # users collection
                "bookshop.models.session",   # sessions collection
                "bookshop.models.order",     # pedidos collection
                "aerich.models",             # Required: Let Aerich manage migration tables
            ],
            "default_connection": "default",
        },
    },
}

async def init_db(generate_schemas: bool | None = None):
    """
    Initialize Tortoise ORM database connection.

    Called during application startup to establish the connection and
    register all models. When ``generate_schemas`` is true (default taken from
    ``settings.generate_schemas``) missing tables and their unique indexes are
    created; existing tables are left untouched.
    """
    if generate_schemas is None:
        generate_schemas = settings.generate_schemas
    await Tortoise.init(config=TORTOISE_ORM)
    if generate_schemas:
        await Tortoise.generate_schemas(safe=True)
    logger.info("[db] connected: %s", TORTOISE_ORM["connections"]["default"].split("@")[-1])

async def close_db():
    """
    Close all database connections.

    Called during application shutdown to release connections.
    """
    await Tortoise.close_connections()
