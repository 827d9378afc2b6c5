from typing import Any, Optional

from sqlalchemy import delete, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database
from src.shared.database.entity_mapper import EntityMapper


class UnitOfWork:
    """
    Transaction boundary for writes.

    Changes staged inside ``async with`` are committed on a clean exit and rolled
    back when the block raises. Commit failures (for example a unique constraint
    violation) are rolled back and re-raised to the caller.

    Updates and deletes target a row by id and touch only the given columns, so
    they never write back values read earlier in the request.
    """

    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            await self.session.close()

    def add(self, model_instance: Any):
        entity = self.entity_mapper.map_to_entity(model_instance)
        self.session.add(entity)

    async def update_by_id(self, model_type: type, entity_id: Any, values: dict[str, Any]) -> Optional[Any]:
        """
        Set ``values`` on the row with ``entity_id``.

        Args:
            model_type: Domain model class whose entity is updated
            entity_id: Primary key of the row
            values: Column values keyed by attribute name

        Returns:
            The domain model built from the updated row, or None if no row has this id
        """
        entity_type = self.entity_mapper.entity_type_for(model_type)
        statement = (
            update(entity_type)
            .where(entity_type.id == entity_id)
            .values(**values)
            .returning(entity_type)
        )
        result = await self.session.execute(statement)
        entity = result.scalar_one_or_none()
        if entity is None:
            return None
        return self.entity_mapper.map_to_model(model_type, entity)

    async def delete_by_id(self, model_type: type, entity_id: Any) -> bool:
        """Delete the row with ``entity_id``; False when there was no such row."""
        entity_type = self.entity_mapper.entity_type_for(model_type)
        result = await self.session.execute(
            delete(entity_type).where(entity_type.id == entity_id)
        )
        return result.rowcount > 0

    async def commit(self):
        try:
            await self.session.commit()
        except Exception:
            await self.rollback()
            raise

    async def rollback(self):
        await self.session.rollback()
