from src.shared.database.base_mapper import BaseEntityMapper
from src.app.core.domain.models import Customer
from src.app.infrastructure.entities.customer_entity import CustomerEntity


class CustomerMapper(BaseEntityMapper[Customer, CustomerEntity]):
    """Mapper for converting between Customer domain model and CustomerEntity."""

    entity_type = CustomerEntity

    @staticmethod
    def to_entity(model_instance: Customer) -> CustomerEntity:
        """Convert a Customer (domain model) to CustomerEntity (database entity)."""
        return CustomerEntity(
            id=model_instance.id,
            first_name=model_instance.first_name,
            last_name=model_instance.last_name,
            email=str(model_instance.email),
            phone_number=model_instance.phone_number,
            address=model_instance.address,
            city=model_instance.city,
            state=model_instance.state,
            country=model_instance.country,
            created_at=model_instance.created_at,
            updated_at=model_instance.updated_at,
        )

    @staticmethod
    def to_model(entity: CustomerEntity) -> Customer:
        """Convert a CustomerEntity (database entity) to Customer (domain model)."""
        return Customer(
            id=entity.id,
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            phone_number=entity.phone_number,
            address=entity.address,
            city=entity.city,
            state=entity.state,
            country=entity.country,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
