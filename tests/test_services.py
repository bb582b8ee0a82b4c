import pytest
from pydantic import ValidationError

from schemas.occupant_schema import OccupantCreate, OccupantUpdate
from schemas.room_schema import RoomCreate, RoomUpdate
from services.occupant_service import OccupantService
from services.room_service import RoomService
from utils.exceptions import NotFoundError


def occupant_payload(**overrides) -> OccupantCreate:
    values = dict(
        name="Asha",
        phone="9000000001",
        email="asha@example.com",
        room_number="R1",
        bed_number=1,
        address="12 MG Road, Pune",
        joining_date="2024-06-01",
    )
    values.update(overrides)
    return OccupantCreate(**values)


@pytest.fixture
def rooms(engine, tenant_id) -> RoomService:
    service = RoomService(engine)
    service.create(tenant_id, RoomCreate(room_number="R1", capacity=3, rent=6500))
    service.create(tenant_id, RoomCreate(room_number="R2", capacity=2, rent=8000))
    return service


@pytest.fixture
def occupants(engine) -> OccupantService:
    return OccupantService(engine)


class TestRoomService:
    def test_update_applies_only_given_fields(self, rooms, tenant_id):
        room = rooms.get_room_by_number(tenant_id, "R1")

        updated = rooms.update(tenant_id, room.id, RoomUpdate(rent=7000))

        assert updated.rent == 7000
        assert updated.capacity == 3
        assert updated.room_number == "R1"

    def test_unknown_room_number(self, rooms, tenant_id):
        with pytest.raises(NotFoundError):
            rooms.get_room_by_number(tenant_id, "R9")

    def test_bed_bookkeeping(self, rooms, tenant_id):
        rooms.add_occupied_bed(tenant_id, "R1", 3)
        rooms.add_occupied_bed(tenant_id, "R1", 1)
        rooms.add_occupied_bed(tenant_id, "R1", 3)

        room = rooms.get_room_by_number(tenant_id, "R1")
        assert room.occupied_bed_numbers == [1, 3]
        assert room.occupied_beds == 2

        rooms.remove_occupied_bed(tenant_id, "R1", 3)
        assert rooms.get_room_by_number(tenant_id, "R1").occupied_bed_numbers == [1]

    def test_no_bed_is_a_no_op(self, rooms, tenant_id):
        assert rooms.add_occupied_bed(tenant_id, "R9", None) is None

    def test_delete(self, rooms, tenant_id):
        room = rooms.get_room_by_number(tenant_id, "R2")
        rooms.delete(tenant_id, room.id)

        with pytest.raises(NotFoundError):
            rooms.get(tenant_id, room.id)


class TestOccupantService:
    def test_create_occupies_bed(self, rooms, occupants, tenant_id):
        occupant = occupants.create(tenant_id, occupant_payload())

        assert occupant.id is not None
        assert rooms.get_room_by_number(tenant_id, "R1").occupied_bed_numbers == [1]

    def test_create_in_unknown_room_stores_nothing(self, rooms, occupants, tenant_id):
        with pytest.raises(NotFoundError):
            occupants.create(tenant_id, occupant_payload(room_number="R9"))

        assert occupants.get_all(tenant_id) == []

    def test_move_to_another_room(self, rooms, occupants, tenant_id):
        occupant = occupants.create(tenant_id, occupant_payload())

        occupants.update(tenant_id, occupant.id, OccupantUpdate(room_number="R2", bed_number=2))

        assert rooms.get_room_by_number(tenant_id, "R1").occupied_bed_numbers == []
        assert rooms.get_room_by_number(tenant_id, "R2").occupied_bed_numbers == [2]

    def test_move_to_unknown_room_keeps_bed(self, rooms, occupants, tenant_id):
        occupant = occupants.create(tenant_id, occupant_payload())

        with pytest.raises(NotFoundError):
            occupants.update(tenant_id, occupant.id, OccupantUpdate(room_number="R9"))

        assert rooms.get_room_by_number(tenant_id, "R1").occupied_bed_numbers == [1]
        assert occupants.get(tenant_id, occupant.id).room_number == "R1"

    def test_blank_room_or_address_is_rejected(self):
        with pytest.raises(ValidationError):
            OccupantUpdate(room_number="")
        with pytest.raises(ValidationError):
            OccupantUpdate(address="")

    def test_move_to_blank_room_changes_nothing(self, rooms, occupants, tenant_id):
        occupant = occupants.create(tenant_id, occupant_payload())

        with pytest.raises(NotFoundError):
            occupants.update(tenant_id, occupant.id, OccupantUpdate.model_construct(room_number=""))

        stored = occupants.get(tenant_id, occupant.id)
        assert stored.room_number == "R1"
        assert stored.bed_number == 1
        assert rooms.get_room_by_number(tenant_id, "R1").occupied_bed_numbers == [1]

    def test_delete_frees_bed(self, rooms, occupants, tenant_id):
        occupant = occupants.create(tenant_id, occupant_payload())

        occupants.delete(tenant_id, occupant.id)

        assert rooms.get_room_by_number(tenant_id, "R1").occupied_beds == 0
        assert occupants.get_all(tenant_id) == []

    def test_queries(self, rooms, occupants, tenant_id):
        occupants.create(tenant_id, occupant_payload())
        occupants.create(
            tenant_id,
            occupant_payload(name="Ravi Kumar", phone="9000000002", email="ravi@example.com", room_number="R2", bed_number=None),
        )

        assert [o.name for o in occupants.get_occupants_by_room(tenant_id, "R2")] == ["Ravi Kumar"]
        assert len(occupants.get_occupants_by_status(tenant_id, "ACTIVE")) == 2
        assert [o.name for o in occupants.search_occupants(tenant_id, "asha")] == ["Asha"]
