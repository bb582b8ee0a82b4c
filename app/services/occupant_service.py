from typing import List

from sqlalchemy.engine import Engine

from repositories.occupant_repository import OccupantRepository
from schemas.occupant_schema import Occupant, OccupantUpdate
from services.base_service import BaseService
from services.room_service import RoomService


class OccupantService(BaseService[Occupant]):
    """Occupants of an admin's rooms, keeping each room's bed set in step"""

    def __init__(self, engine: Engine):
        super().__init__(OccupantRepository(engine))
        self.room_service = RoomService(engine)

    def create(self, tenant_id: int, obj_in) -> Occupant:
        if obj_in.bed_number is not None:
            # fail before storing anything if the room is unknown
            self.room_service.get_room_by_number(tenant_id, obj_in.room_number)

        occupant = super().create(tenant_id, obj_in)
        if occupant.bed_number is not None:
            self.room_service.add_occupied_bed(tenant_id, occupant.room_number, occupant.bed_number)
        return occupant

    def update(self, tenant_id: int, id: int, obj_in: OccupantUpdate) -> Occupant:
        current = self.get(tenant_id, id)
        target_room = obj_in.room_number if obj_in.room_number is not None else current.room_number
        target_bed = obj_in.bed_number if obj_in.bed_number is not None else current.bed_number
        if target_bed is not None and target_room != current.room_number:
            self.room_service.get_room_by_number(tenant_id, target_room)

        updated = super().update(tenant_id, id, obj_in)

        moved = (
            current.room_number != updated.room_number
            or current.bed_number != updated.bed_number
        )
        if moved:
            if current.bed_number is not None:
                self.room_service.remove_occupied_bed(tenant_id, current.room_number, current.bed_number)
            if updated.bed_number is not None:
                self.room_service.add_occupied_bed(tenant_id, updated.room_number, updated.bed_number)
        return updated

    def delete(self, tenant_id: int, id: int) -> None:
        occupant = self.get(tenant_id, id)
        if occupant.bed_number is not None:
            self.room_service.remove_occupied_bed(tenant_id, occupant.room_number, occupant.bed_number)
        self.repository.delete_by_id(tenant_id, id)

    def get_occupants_by_status(self, tenant_id: int, status: str) -> List[Occupant]:
        return self.repository.find_by_status(tenant_id, status)

    def get_occupants_by_room(self, tenant_id: int, room_number: str) -> List[Occupant]:
        return self.repository.find_by_room_number(tenant_id, room_number)

    def search_occupants(self, tenant_id: int, name: str) -> List[Occupant]:
        return self.repository.search_by_name(tenant_id, name)
