"""Repository for Customer lookups, paginated listing and full-text search."""
from uuid import UUID
from typing import Optional

from sqlalchemy import select, func, text

from src.app.core.domain.models import (
    Customer,
    CustomerListQuery,
    CustomerSortField,
    Page,
    PaginationMeta,
    SortOrder,
)
from src.shared.database.base_repo import BaseRepository
from src.shared.database.database import Database
from src.app.infrastructure.entities.customer_entity import CustomerEntity
from src.app.infrastructure.mappers.customer_mapper import CustomerMapper

# Allow-list translating API sort fields to storage columns. Nothing else ever
# reaches an ORDER BY clause.
SORT_COLUMNS: dict[CustomerSortField, str] = {
    CustomerSortField.ID: "id",
    CustomerSortField.FIRST_NAME: "first_name",
    CustomerSortField.LAST_NAME: "last_name",
    CustomerSortField.EMAIL: "email",
    CustomerSortField.PHONE_NUMBER: "phone_number",
    CustomerSortField.ADDRESS: "address",
    CustomerSortField.CITY: "city",
    CustomerSortField.STATE: "state",
    CustomerSortField.COUNTRY: "country",
    CustomerSortField.CREATED_AT: "created_at",
    CustomerSortField.UPDATED_AT: "updated_at",
}

SORT_DIRECTIONS: dict[SortOrder, str] = {
    SortOrder.ASC: "ASC",
    SortOrder.DESC: "DESC",
}

_SELECT_COLUMNS = (
    "id, first_name, last_name, email, phone_number, address, "
    "city, state, country, created_at, updated_at"
)
_SEARCH_PREDICATE = "search_vector @@ websearch_to_tsquery('simple', :search)"


def sort_clause(sort_by: CustomerSortField, order: SortOrder) -> tuple[str, str]:
    """
    Resolve a sort request to a (column, direction) pair from the allow-lists.

    Raises:
        ValueError: If either value is not allow-listed
    """
    try:
        return SORT_COLUMNS[sort_by], SORT_DIRECTIONS[order]
    except KeyError as e:
        raise ValueError(f"Unsupported sort: {sort_by!r} {order!r}") from e


class CustomerRepository(BaseRepository[CustomerEntity, Customer]):
    """Repository for Customer operations."""

    def __init__(self, db: Database, mapper: CustomerMapper):
        super().__init__(db, mapper)

    async def get_by_id(self, customer_id: UUID) -> Optional[Customer]:
        """Get a customer by ID."""
        return await self.find_one(
            select(CustomerEntity).where(CustomerEntity.id == customer_id)
        )

    async def get_by_email(self, email: str) -> Optional[Customer]:
        """Get a customer by email."""
        return await self.find_one(
            select(CustomerEntity).where(CustomerEntity.email == email)
        )

    async def count(self) -> int:
        """Total number of customers, unfiltered."""
        return await self.find_scalar(select(func.count()).select_from(CustomerEntity))

    async def find_page(self, query: CustomerListQuery) -> Page[Customer]:
        """
        Fetch one page of customers.

        Without a search term the ORM query builder is used. With a search term
        the rows are filtered by the full-text predicate over ``search_vector``
        using raw SQL where only bound parameters and allow-listed identifiers
        appear.

        Args:
            query: Validated listing request

        Returns:
            Page with the requested window and metadata computed over the
            (possibly filtered) row set
        """
        column, direction = sort_clause(query.sort_by, query.order)

        if query.search:
            total, customers = await self._search_page(query, column, direction)
        else:
            total, customers = await self._plain_page(query, column, direction)

        return Page(
            data=customers,
            meta=PaginationMeta.build(page=query.page, limit=query.limit, total=total),
        )

    async def _plain_page(
        self, query: CustomerListQuery, column: str, direction: str
    ) -> tuple[int, list[Customer]]:
        total = await self.count()
        if query.offset >= total:
            return total, []

        sort_column = CustomerEntity.__table__.c[column]
        ordering = sort_column.asc() if direction == "ASC" else sort_column.desc()
        stmt = (
            select(CustomerEntity)
            .order_by(ordering, CustomerEntity.id.asc())
            .offset(query.offset)
            .limit(query.limit)
        )
        return total, await self.find_all(stmt)

    async def _search_page(
        self, query: CustomerListQuery, column: str, direction: str
    ) -> tuple[int, list[Customer]]:
        total = await self.find_scalar(
            text(f"SELECT count(*) FROM customers WHERE {_SEARCH_PREDICATE}")
            .bindparams(search=query.search)
        )
        if query.offset >= total:
            return total, []

        rows = text(
            f"SELECT {_SELECT_COLUMNS} FROM customers "
            f"WHERE {_SEARCH_PREDICATE} "
            f"ORDER BY {column} {direction}, id ASC "
            "LIMIT :limit OFFSET :offset"
        ).bindparams(search=query.search, limit=query.limit, offset=query.offset)

        return total, await self.find_all(select(CustomerEntity).from_statement(rows))
