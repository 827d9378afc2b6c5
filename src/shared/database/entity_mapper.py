from typing import Any

from src.shared.database.base_mapper import BaseEntityMapper


class EntityMapper:
    """Dispatches domain models to the mapper registered for their type."""

    def __init__(self, entity_mappings: dict[type, BaseEntityMapper]):
        self.entity_mappings = entity_mappings

    def mapper_for(self, model_type: type) -> BaseEntityMapper:
        mapper = self.entity_mappings.get(model_type)
        if mapper is None:
            raise ValueError(f"No entity mapping found for model type: {model_type.__name__}")
        return mapper

    def map_to_entity(self, model_instance: Any):
        return self.mapper_for(type(model_instance)).to_entity(model_instance)

    def map_to_model(self, model_type: type, entity: Any):
        return self.mapper_for(model_type).to_model(entity)

    def entity_type_for(self, model_type: type) -> type:
        return self.mapper_for(model_type).entity_type
