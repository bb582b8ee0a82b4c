from typing import List, Optional

from sqlalchemy import select

from enums.entity_kind import EntityKind
from mappers.occupant_mapper import OccupantMapper
from repositories.base_repository import TenantRepository
from schemas.occupant_schema import Occupant


class OccupantRepository(TenantRepository[Occupant]):
    kind = EntityKind.OCCUPANTS
    mapper = OccupantMapper()
    entity_name = "Tenant"
    unique_fields = ("phone",)

    def find_by_phone(self, tenant_id: int, phone: str) -> Optional[Occupant]:
        return self._find_one_by(tenant_id, "phone", phone)

    def find_by_email(self, tenant_id: int, email: str) -> Optional[Occupant]:
        return self._find_one_by(tenant_id, "email", email)

    def find_by_room_number(self, tenant_id: int, room_number: str) -> List[Occupant]:
        return self._find_by(tenant_id, "room_number", room_number)

    def find_by_status(self, tenant_id: int, status: str) -> List[Occupant]:
        return self._find_by(tenant_id, "status", status)

    def search_by_name(self, tenant_id: int, name: str) -> List[Occupant]:
        table = self.table(tenant_id)
        return self._query(
            select(table).where(table.c.name.contains(name, autoescape=True)).order_by(table.c.id)
        )
