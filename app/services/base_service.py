from typing import Generic

from pydantic import BaseModel

from mappers.base_mapper import EntityType
from repositories.base_repository import TenantRepository


class BaseService(Generic[EntityType]):
    def __init__(self, repository: TenantRepository):
        self.repository = repository

    def get_all(self, tenant_id: int):
        return self.repository.find_all(tenant_id)

    def get(self, tenant_id: int, id: int) -> EntityType:
        return self.repository.get_by_id(tenant_id, id)

    def create(self, tenant_id: int, obj_in) -> EntityType:
        """
        Insert a new record into the admin's table

        Args:
            tenant_id: The admin id
            obj_in: Either a record or a create schema

        Returns:
            The stored record with its generated id and defaults
        """
        if isinstance(obj_in, self.repository.mapper.entity_class):
            entity = obj_in.model_copy(update={"id": None})
        else:
            entity = self.repository.mapper.entity_class(**obj_in.model_dump())
        return self.repository.save(tenant_id, entity)

    def update(self, tenant_id: int, id: int, obj_in: BaseModel) -> EntityType:
        """Apply the non-null fields of obj_in to the stored record"""
        entity = self.get(tenant_id, id)
        changes = {
            key: value
            for key, value in obj_in.model_dump(exclude_unset=True).items()
            if value is not None
        }
        return self.repository.save(tenant_id, entity.model_copy(update=changes))

    def delete(self, tenant_id: int, id: int) -> None:
        self.get(tenant_id, id)
        self.repository.delete_by_id(tenant_id, id)
