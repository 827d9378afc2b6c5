"""Builders for customer test data."""
from datetime import datetime, timedelta, UTC
from uuid import uuid4

from src.app.core.domain.models import Customer

BASE_TIME = datetime(2024, 1, 1, 9, 0, tzinfo=UTC)


def make_customer(index: int = 0, **overrides) -> Customer:
    """
    Build a valid Customer whose created_at increases with ``index``.

    Args:
        index: Distinguishes generated names, emails and timestamps
        **overrides: Field values replacing the generated ones
    """
    created_at = BASE_TIME + timedelta(minutes=index)
    values = {
        "id": uuid4(),
        "first_name": f"First{index:03d}",
        "last_name": f"Last{index:03d}",
        "email": f"customer{index:03d}@example.com",
        "created_at": created_at,
        "updated_at": created_at,
    }
    values.update(overrides)
    return Customer(**values)
