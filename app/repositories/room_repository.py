from typing import List, Optional

from enums.entity_kind import EntityKind
from mappers.room_mapper import RoomMapper
from repositories.base_repository import TenantRepository
from schemas.room_schema import Room


class RoomRepository(TenantRepository[Room]):
    kind = EntityKind.ROOMS
    mapper = RoomMapper()
    entity_name = "Room"
    unique_fields = ("room_number",)

    def find_by_room_number(self, tenant_id: int, room_number: str) -> Optional[Room]:
        return self._find_one_by(tenant_id, "room_number", room_number)

    def find_by_status(self, tenant_id: int, status: str) -> List[Room]:
        return self._find_by(tenant_id, "status", status)
