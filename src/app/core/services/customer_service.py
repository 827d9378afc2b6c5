"""Customer service: validation, email uniqueness and CRUD orchestration."""
import logging
from collections.abc import Mapping
from typing import Any, TypeVar
from uuid import UUID, uuid4
from datetime import datetime, UTC

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError

from src.app.core.domain.models import Customer, CustomerListQuery, Page
from src.app.infrastructure.customer_repository import CustomerRepository
from src.client.schemas import CreateCustomerRequest, UpdateCustomerRequest
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.exceptions import ConflictingEntityFound, EntityNotFound, InvalidInput

logger = logging.getLogger(__name__)

TRequest = TypeVar("TRequest", bound=BaseModel)

CustomerInput = BaseModel | Mapping[str, Any]


def _as_payload(data: CustomerInput) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=True)
    return dict(data)


def _validate(schema: type[TRequest], payload: dict[str, Any]) -> TRequest:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidInput.from_validation_error(e) from e


class CustomerService:
    """Service for handling Customer business logic."""

    def __init__(
        self,
        repository: CustomerRepository,
        unit_of_work: UnitOfWork,
        max_page_size: int = 100,
    ):
        """
        Initialize the customer service.

        Args:
            repository: Repository for customer reads
            unit_of_work: Unit of work for customer writes
            max_page_size: Largest ``limit`` a listing may request
        """
        self.repository = repository
        self.unit_of_work = unit_of_work
        self.max_page_size = max_page_size

    async def list_customers(self, query: CustomerListQuery) -> Page[Customer]:
        """Return one page of customers, optionally filtered by full-text search."""
        if query.limit > self.max_page_size:
            raise InvalidInput.for_field(
                "limit", f"Input should be less than or equal to {self.max_page_size}"
            )
        return await self.repository.find_page(query)

    async def get_customer(self, customer_id: UUID) -> Customer:
        """Get a customer by ID."""
        customer = await self.repository.get_by_id(customer_id)
        if not customer:
            raise EntityNotFound("Customer", customer_id)
        return customer

    async def count_customers(self) -> int:
        return await self.repository.count()

    async def create_customer(self, data: CustomerInput) -> Customer:
        """
        Create a new customer.

        The email pre-check gives a friendly error in the common case; the
        unique constraint on the table is what rejects a concurrent duplicate.

        Raises:
            InvalidInput: If the payload fails validation
            ConflictingEntityFound: If the email is already in use
        """
        request = _validate(CreateCustomerRequest, _as_payload(data))

        if await self.repository.get_by_email(str(request.email)):
            logger.warning("Rejected customer create: email %s already in use", request.email)
            raise ConflictingEntityFound("Customer", "email", request.email)

        now = datetime.now(UTC)
        customer = Customer(
            id=uuid4(),
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone_number=request.phone_number,
            address=request.address,
            city=request.city,
            state=request.state,
            country=request.country,
            created_at=now,
            updated_at=now,
        )

        try:
            async with self.unit_of_work:
                self.unit_of_work.add(customer)
        except IntegrityError as e:
            logger.warning("Rejected customer create: email %s taken concurrently", request.email)
            raise ConflictingEntityFound("Customer", "email", request.email) from e

        logger.info("Created customer %s", customer.id)
        return customer

    async def update_customer(self, customer_id: UUID, data: CustomerInput) -> Customer:
        """
        Apply a partial update to a customer.

        Only fields present in ``data`` are changed. An ``id`` in the payload is
        ignored in favour of ``customer_id``.

        Raises:
            EntityNotFound: If no customer has this id
            InvalidInput: If the changes fail validation
            ConflictingEntityFound: If the new email belongs to another customer
        """
        await self.get_customer(customer_id)

        payload = _as_payload(data)
        payload.pop("id", None)
        request = _validate(UpdateCustomerRequest, {**payload, "id": customer_id})
        changes = request.model_dump(exclude_unset=True, exclude={"id"})

        if "email" in changes:
            holder = await self.repository.get_by_email(changes["email"])
            if holder is not None and holder.id != customer_id:
                logger.warning("Rejected customer update %s: email %s already in use", customer_id, changes["email"])
                raise ConflictingEntityFound("Customer", "email", changes["email"])

        values = {**changes, "updated_at": datetime.now(UTC)}

        try:
            async with self.unit_of_work:
                customer = await self.unit_of_work.update_by_id(Customer, customer_id, values)
        except IntegrityError as e:
            logger.warning("Rejected customer update %s: email %s taken concurrently", customer_id, changes.get("email"))
            raise ConflictingEntityFound("Customer", "email", changes.get("email")) from e

        if customer is None:
            # Deleted by another request after the existence check
            raise EntityNotFound("Customer", customer_id)

        logger.info("Updated customer %s (%s)", customer_id, ", ".join(sorted(changes)) or "no fields")
        return customer

    async def delete_customer(self, customer_id: UUID) -> None:
        """
        Hard-delete a customer.

        Raises:
            EntityNotFound: If no customer has this id, including one removed by a concurrent delete
        """
        async with self.unit_of_work:
            deleted = await self.unit_of_work.delete_by_id(Customer, customer_id)

        if not deleted:
            raise EntityNotFound("Customer", customer_id)

        logger.info("Deleted customer %s", customer_id)
