"""Database entities for the infrastructure layer."""
from src.app.infrastructure.entities.customer_entity import CustomerEntity

__all__ = [
    "CustomerEntity",
]
