from datetime import datetime
from typing import Any, Generic, List, Optional, Tuple

from sqlalchemy import Table, delete, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.sql import Select

from database.tenant_tables import build_table
from enums.entity_kind import EntityKind
from mappers.base_mapper import EntityType, RowMapper
from utils.exceptions import DuplicateError, NotFoundError
from utils.logger import get_logger

logger = get_logger("repositories")


class TenantRepository(Generic[EntityType]):
    """
    CRUD against one kind of table, scoped to the admin passed to each call.

    Only the table name is dynamic; every value travels as a bound
    parameter. Each public method holds one pooled connection for its
    duration and gives it back on every exit path.
    """

    kind: EntityKind
    mapper: RowMapper
    entity_name: str = "Record"
    # record attributes that must be unique within one admin's table
    unique_fields: Tuple[str, ...] = ()

    def __init__(self, engine: Engine):
        self.engine = engine

    def table(self, tenant_id: int) -> Table:
        return build_table(tenant_id, self.kind)

    def find_all(self, tenant_id: int) -> List[EntityType]:
        table = self.table(tenant_id)
        return self._query(select(table).order_by(table.c.id))

    def find_by_id(self, tenant_id: int, id: int) -> Optional[EntityType]:
        table = self.table(tenant_id)
        return self._first(select(table).where(table.c.id == id))

    def get_by_id(self, tenant_id: int, id: int) -> EntityType:
        entity = self.find_by_id(tenant_id, id)
        if entity is None:
            raise NotFoundError(self.entity_name, id)
        return entity

    def save(self, tenant_id: int, entity: EntityType) -> EntityType:
        """Insert when the entity has no id yet, update otherwise"""
        table = self.table(tenant_id)
        with self.engine.begin() as conn:
            if self.mapper.is_new(entity):
                return self._insert(conn, table, tenant_id, entity)
            return self._update(conn, table, tenant_id, entity)

    def delete_by_id(self, tenant_id: int, id: int) -> bool:
        table = self.table(tenant_id)
        with self.engine.begin() as conn:
            result = conn.execute(delete(table).where(table.c.id == id))
        logger.debug(f"Deleted {self.entity_name} {id} from {table.name}", extra={"tenant_id": tenant_id})
        return result.rowcount > 0

    def _insert(self, conn: Connection, table: Table, tenant_id: int, entity: EntityType) -> EntityType:
        self._check_unique(conn, table, entity)

        entity = self.mapper.apply_defaults(entity.model_copy())
        now = _now()
        entity.created_at = now
        entity.updated_at = now

        # the generated key comes back from the same statement execution
        result = conn.execute(table.insert(), self.mapper.bind_parameters(entity))
        entity.id = result.inserted_primary_key[0]
        logger.debug(f"Inserted {self.entity_name} {entity.id} into {table.name}", extra={"tenant_id": tenant_id})
        return entity

    def _update(self, conn: Connection, table: Table, tenant_id: int, entity: EntityType) -> EntityType:
        self._check_unique(conn, table, entity)

        entity = entity.model_copy()
        entity.updated_at = _now()

        result = conn.execute(
            update(table).where(table.c.id == entity.id).values(**self.mapper.bind_update(entity))
        )
        if result.rowcount == 0:
            raise NotFoundError(self.entity_name, entity.id)
        logger.debug(f"Updated {self.entity_name} {entity.id} in {table.name}", extra={"tenant_id": tenant_id})
        return entity

    def _check_unique(self, conn: Connection, table: Table, entity: EntityType) -> None:
        for attribute in self.unique_fields:
            value = getattr(entity, attribute)
            if value is None:
                continue
            column = table.c[self.mapper.column_for(attribute)]
            query = select(table.c.id).where(column == value)
            if entity.id is not None:
                query = query.where(table.c.id != entity.id)
            if conn.execute(query.limit(1)).first() is not None:
                raise DuplicateError(self.entity_name, attribute, value)

    def _find_by(self, tenant_id: int, attribute: str, value: Any) -> List[EntityType]:
        table = self.table(tenant_id)
        column = table.c[self.mapper.column_for(attribute)]
        return self._query(select(table).where(column == value).order_by(table.c.id))

    def _find_one_by(self, tenant_id: int, attribute: str, value: Any) -> Optional[EntityType]:
        table = self.table(tenant_id)
        column = table.c[self.mapper.column_for(attribute)]
        return self._first(select(table).where(column == value).order_by(table.c.id))

    def _query(self, query: Select) -> List[EntityType]:
        with self.engine.connect() as conn:
            rows = conn.execute(query).all()
        return [self.mapper.decode(row) for row in rows]

    def _first(self, query: Select) -> Optional[EntityType]:
        rows = self._query(query.limit(1))
        return rows[0] if rows else None


def _now() -> datetime:
    # TIMESTAMP columns keep whole seconds
    return datetime.now().replace(microsecond=0)
