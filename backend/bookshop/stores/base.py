# bookshop/stores/base.py
from contextlib import contextmanager

from tortoise.exceptions import BaseORMException, IntegrityError

from bookshop.core.errors import StoreConflict, StoreError


@contextmanager
def translate_orm_errors(action: str):
    """
    Re-raise Tortoise errors as store errors.

    ``IntegrityError`` (a unique index rejected the write) becomes
    ``StoreConflict``; any other ORM or driver failure becomes ``StoreError``.
    """
    try:
        yield
    except IntegrityError as e:
        raise StoreConflict(f"{action}: {e}") from e
    except BaseORMException as e:
        raise StoreError(f"{action}: {e}") from e
