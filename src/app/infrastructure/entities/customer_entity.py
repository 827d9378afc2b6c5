from datetime import datetime
from uuid import UUID, uuid4
from sqlalchemy import Computed, String, DateTime, func, Index
from sqlalchemy.dialects.postgresql import TSVECTOR
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base

# Every textual column feeds the search document. The 'simple' configuration
# keeps tokens unstemmed so names and place names match verbatim.
SEARCH_VECTOR_EXPRESSION = (
    "to_tsvector('simple', "
    "coalesce(first_name, '') || ' ' || "
    "coalesce(last_name, '') || ' ' || "
    "coalesce(email, '') || ' ' || "
    "coalesce(phone_number, '') || ' ' || "
    "coalesce(address, '') || ' ' || "
    "coalesce(city, '') || ' ' || "
    "coalesce(state, '') || ' ' || "
    "coalesce(country, ''))"
)


class CustomerEntity(Base):
    """SQLAlchemy model for Customer table."""
    __tablename__ = "customers"

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(100), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )

    # Derived by PostgreSQL on every write; never set from Python
    search_vector: Mapped[str] = mapped_column(
        TSVECTOR,
        Computed(SEARCH_VECTOR_EXPRESSION, persisted=True),
        deferred=True,
    )


# GIN index backing the full-text predicate in CustomerRepository
Index(
    "ix_customers_search_vector_gin",
    CustomerEntity.search_vector,
    postgresql_using="gin",
)

Index("ix_customers_created_at", CustomerEntity.created_at)
