from typing import List, Optional

from sqlalchemy.engine import Engine

from repositories.room_repository import RoomRepository
from schemas.room_schema import Room
from services.base_service import BaseService
from utils.exceptions import NotFoundError


class RoomService(BaseService[Room]):
    def __init__(self, engine: Engine):
        super().__init__(RoomRepository(engine))

    def get_rooms_by_status(self, tenant_id: int, status: str) -> List[Room]:
        return self.repository.find_by_status(tenant_id, status)

    def get_room_by_number(self, tenant_id: int, room_number: str) -> Room:
        room = self.repository.find_by_room_number(tenant_id, room_number)
        if room is None:
            raise NotFoundError("Room", room_number)
        return room

    def add_occupied_bed(self, tenant_id: int, room_number: str, bed_number: Optional[int]) -> Optional[Room]:
        if bed_number is None:
            return None
        room = self.get_room_by_number(tenant_id, room_number)
        occupied = set(room.occupied_bed_numbers) | {bed_number}
        return self._store_beds(tenant_id, room, occupied)

    def remove_occupied_bed(self, tenant_id: int, room_number: str, bed_number: Optional[int]) -> Optional[Room]:
        if bed_number is None:
            return None
        room = self.get_room_by_number(tenant_id, room_number)
        occupied = set(room.occupied_bed_numbers) - {bed_number}
        return self._store_beds(tenant_id, room, occupied)

    def _store_beds(self, tenant_id: int, room: Room, occupied: set) -> Room:
        room = room.model_copy(
            update={"occupied_bed_numbers": sorted(occupied), "occupied_beds": len(occupied)}
        )
        return self.repository.save(tenant_id, room)
