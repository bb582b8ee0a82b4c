import re
from datetime import date

import pytest
from sqlalchemy import event

from enums.entity_kind import EntityKind
from repositories.occupant_repository import OccupantRepository
from repositories.payment_repository import PaymentRepository
from repositories.room_repository import RoomRepository
from repositories.staff_repository import StaffRepository
from schemas.staff_schema import Staff
from utils.exceptions import DuplicateError, NotFoundError

from conftest import make_occupant, make_payment, make_room


@pytest.fixture
def statements(engine):
    """SQL statements sent to the database while the test runs"""
    seen = []

    def record(conn, cursor, statement, parameters, context, executemany):
        seen.append(statement)

    event.listen(engine, "before_cursor_execute", record)
    yield seen
    event.remove(engine, "before_cursor_execute", record)


class TestOccupantRepository:
    def test_end_to_end_insert_and_list(self, engine, provisioner, tenant_id):
        assert provisioner.all_tables_present(tenant_id)
        repository = OccupantRepository(engine)

        repository.save(tenant_id, make_occupant())
        occupants = repository.find_all(tenant_id)

        assert len(occupants) == 1
        assert occupants[0].name == "Asha"
        assert occupants[0].status == "ACTIVE"
        assert occupants[0].created_at is not None

    def test_round_trip_preserves_fields(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        original = make_occupant(age=24, gender="F", bed_number=2, identity_proof_type="Aadhaar")

        saved = repository.save(tenant_id, original)
        loaded = repository.get_by_id(tenant_id, saved.id)

        assert saved.id is not None
        assert loaded.model_dump(exclude={"id", "status", "created_at", "updated_at"}) == original.model_dump(
            exclude={"id", "status", "created_at", "updated_at"}
        )

    def test_null_age_is_absent(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        saved = repository.save(tenant_id, make_occupant(age=None))

        assert repository.get_by_id(tenant_id, saved.id).age is None

    def test_duplicate_phone(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        repository.save(tenant_id, make_occupant())

        with pytest.raises(DuplicateError, match="Phone already exists"):
            repository.save(tenant_id, make_occupant(name="Ravi", email="ravi@example.com"))

    def test_update_may_keep_own_phone(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        saved = repository.save(tenant_id, make_occupant())

        updated = repository.save(tenant_id, saved.model_copy(update={"address": "4 FC Road, Pune"}))

        assert repository.get_by_id(tenant_id, saved.id).address == "4 FC Road, Pune"
        assert updated.created_at == saved.created_at

    def test_filters(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        repository.save(tenant_id, make_occupant())
        repository.save(
            tenant_id,
            make_occupant(name="Ravi Kumar", phone="9000000002", email="ravi@example.com", room_number="R2", status="VACATED"),
        )

        assert repository.find_by_phone(tenant_id, "9000000002").name == "Ravi Kumar"
        assert repository.find_by_email(tenant_id, "asha@example.com").phone == "9000000001"
        assert [o.name for o in repository.find_by_room_number(tenant_id, "R2")] == ["Ravi Kumar"]
        assert [o.name for o in repository.find_by_status(tenant_id, "ACTIVE")] == ["Asha"]
        assert [o.name for o in repository.search_by_name(tenant_id, "Kum")] == ["Ravi Kumar"]
        assert repository.find_by_phone(tenant_id, "9999999999") is None

    def test_search_value_is_bound(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        repository.save(tenant_id, make_occupant())

        assert repository.search_by_name(tenant_id, "' OR '1'='1") == []

    def test_search_treats_wildcards_literally(self, engine, tenant_id):
        repository = OccupantRepository(engine)
        repository.save(tenant_id, make_occupant())
        repository.save(
            tenant_id,
            make_occupant(name="Ravi_100%", phone="9000000002", email="ravi@example.com"),
        )

        assert repository.search_by_name(tenant_id, "%") == [
            repository.find_by_phone(tenant_id, "9000000002")
        ]
        assert [o.name for o in repository.search_by_name(tenant_id, "_")] == ["Ravi_100%"]
        assert [o.name for o in repository.search_by_name(tenant_id, "sh")] == ["Asha"]


class TestRoomRepository:
    def test_null_capacity_and_default_beds(self, engine, tenant_id):
        repository = RoomRepository(engine)
        saved = repository.save(tenant_id, make_room(capacity=None))

        room = repository.get_by_id(tenant_id, saved.id)
        assert room.capacity is None
        assert room.occupied_beds == 0
        assert room.occupied_bed_numbers == []
        assert room.status == "AVAILABLE"

    def test_duplicate_room_raises_before_insert(self, engine, tenant_id, statements):
        repository = RoomRepository(engine)
        repository.save(tenant_id, make_room())
        statements.clear()

        with pytest.raises(DuplicateError, match="Room number already exists"):
            repository.save(tenant_id, make_room(rent=7000.0))

        assert not any(statement.lstrip().upper().startswith("INSERT") for statement in statements)
        assert len(repository.find_all(tenant_id)) == 1

    def test_same_room_number_in_another_tenant(self, engine, provisioner, tenant_id):
        provisioner.provision_tenant(8)
        repository = RoomRepository(engine)
        repository.save(tenant_id, make_room())

        other = repository.save(8, make_room())

        assert other.id is not None
        assert len(repository.find_all(8)) == 1
        assert len(repository.find_all(tenant_id)) == 1

    def test_delete_only_room_keeps_table(self, engine, provisioner, tenant_id):
        repository = RoomRepository(engine)
        saved = repository.save(tenant_id, make_room())

        assert repository.delete_by_id(tenant_id, saved.id) is True
        assert repository.find_all(tenant_id) == []
        assert provisioner.table_exists(tenant_id, EntityKind.ROOMS)

    def test_delete_missing_row(self, engine, tenant_id):
        assert RoomRepository(engine).delete_by_id(tenant_id, 404) is False

    def test_get_missing_row(self, engine, tenant_id):
        with pytest.raises(NotFoundError, match="Room not found with id: 99"):
            RoomRepository(engine).get_by_id(tenant_id, 99)

    def test_update_missing_row(self, engine, tenant_id):
        with pytest.raises(NotFoundError):
            RoomRepository(engine).save(tenant_id, make_room(id=99))


class TestStaffRepository:
    def test_unique_username_and_email(self, engine, tenant_id):
        repository = StaffRepository(engine)
        repository.save(tenant_id, Staff(username="kiran", email="kiran@sunrisepg.in", role="WARDEN"))

        with pytest.raises(DuplicateError, match="Username already exists"):
            repository.save(tenant_id, Staff(username="kiran", email="other@sunrisepg.in", role="COOK"))
        with pytest.raises(DuplicateError, match="Email already exists"):
            repository.save(tenant_id, Staff(username="lata", email="kiran@sunrisepg.in", role="COOK"))

    def test_find_by_role(self, engine, tenant_id):
        repository = StaffRepository(engine)
        repository.save(tenant_id, Staff(username="kiran", email="kiran@sunrisepg.in", role="WARDEN"))
        repository.save(tenant_id, Staff(username="lata", email="lata@sunrisepg.in", role="COOK"))

        assert [s.username for s in repository.find_by_role(tenant_id, "COOK")] == ["lata"]
        assert repository.find_by_username(tenant_id, "kiran").role == "WARDEN"
        assert repository.find_by_email(tenant_id, "nobody@sunrisepg.in") is None


class TestPaymentRepository:
    def test_blank_transaction_id_is_generated(self, engine, tenant_id):
        repository = PaymentRepository(engine)
        saved = repository.save(tenant_id, make_payment())

        payment = repository.get_by_id(tenant_id, saved.id)
        assert re.fullmatch(r"TXN\d+\d{4}", payment.transaction_id)
        assert payment.transaction_details.startswith("Payment of ₹5000.00 by Asha")
        assert payment.status == "COMPLETED"

    def test_given_transaction_id_is_kept(self, engine, tenant_id):
        repository = PaymentRepository(engine)
        saved = repository.save(tenant_id, make_payment(transaction_id="UPI-20240605-77"))

        assert repository.get_by_id(tenant_id, saved.id).transaction_id == "UPI-20240605-77"

    def test_filters(self, engine, tenant_id):
        repository = PaymentRepository(engine)
        repository.save(tenant_id, make_payment(occupant_id=1, payment_date=date(2024, 6, 5)))
        repository.save(tenant_id, make_payment(student="Ravi", method="CASH", payment_date=date(2024, 7, 5)))
        repository.save(tenant_id, make_payment(occupant_id=1, payment_date=date(2024, 5, 5), status="PENDING"))

        in_range = repository.find_by_date_range(tenant_id, date(2024, 5, 1), date(2024, 6, 30))
        assert [p.payment_date for p in in_range] == [date(2024, 5, 5), date(2024, 6, 5)]
        assert len(repository.find_by_occupant(tenant_id, 1)) == 2
        assert [p.student for p in repository.find_by_method(tenant_id, "CASH")] == ["Ravi"]
        assert len(repository.find_by_student(tenant_id, "Asha")) == 2
        assert len(repository.find_by_status(tenant_id, "PENDING")) == 1
