"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings
from src.shared.database.unit_of_work import UnitOfWork
from src.shared.database.entity_mapper import EntityMapper

from src.app.infrastructure.mappers.customer_mapper import CustomerMapper
from src.app.infrastructure.customer_repository import CustomerRepository

from src.app.core.services.customer_service import CustomerService

from src.app.core.domain.models import Customer


def create_entity_mapper(customer_mapper: CustomerMapper) -> EntityMapper:
    """Factory function to create EntityMapper with proper mappings."""
    return EntityMapper(
        entity_mappings={
            Customer: customer_mapper,
        }
    )


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.customers",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    customer_mapper = providers.Singleton(CustomerMapper)

    entity_mapper = providers.Singleton(
        create_entity_mapper,
        customer_mapper=customer_mapper,
    )

    # =========================================================================
    # SINGLETON - Database (shared connection pool)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories and Unit of Work (per-request, share database singleton)
    # =========================================================================
    customer_repository = providers.Factory(
        CustomerRepository,
        db=database,
        mapper=customer_mapper,
    )

    unit_of_work = providers.Factory(
        UnitOfWork,
        db=database,
        entity_mapper=entity_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    customer_service = providers.Factory(
        CustomerService,
        repository=customer_repository,
        unit_of_work=unit_of_work,
        max_page_size=config.provided.pagination.max_limit,
    )
