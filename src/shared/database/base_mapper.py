import abc
from typing import ClassVar, Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Two-way translation between a domain model and its ORM entity."""

    # ORM class targeted by id-based UPDATE and DELETE statements
    entity_type: ClassVar[type]

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        """Build a (transient) ORM entity from a domain model."""

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        """Build a domain model from a loaded ORM entity."""
