from mappers.base_mapper import RowMapper, as_date, as_datetime, as_optional_int, row_mapping
from enums.occupant_status import OccupantStatus
from schemas.occupant_schema import Occupant


class OccupantMapper(RowMapper[Occupant]):
    entity_class = Occupant
    fields = (
        ("name", "name"),
        ("age", "age"),
        ("gender", "gender"),
        ("phone", "phone"),
        ("email", "email"),
        ("room_number", "room_number"),
        ("bed_number", "bed_number"),
        ("address", "address"),
        ("joining_date", "joining_date"),
        ("identity_proof_type", "identity_proof_type"),
        ("identity_proof", "identity_proof"),
        ("status", "status"),
        ("created_at", "created_at"),
        ("updated_at", "updated_at"),
    )

    def decode(self, row) -> Occupant:
        data = row_mapping(row)
        return Occupant(
            id=as_optional_int(data["id"]),
            name=data["name"],
            age=as_optional_int(data["age"]),
            gender=data["gender"],
            phone=data["phone"],
            email=data["email"],
            room_number=data["room_number"],
            bed_number=as_optional_int(data["bed_number"]),
            address=data["address"],
            joining_date=as_date(data["joining_date"]),
            identity_proof_type=data["identity_proof_type"],
            identity_proof=data["identity_proof"],
            status=data["status"],
            created_at=as_datetime(data["created_at"]),
            updated_at=as_datetime(data["updated_at"]),
        )

    def apply_defaults(self, entity: Occupant) -> Occupant:
        if entity.status is None:
            entity.status = OccupantStatus.ACTIVE.value
        return entity
