from mappers.base_mapper import RowMapper, as_datetime, as_optional_int, row_mapping
from schemas.staff_schema import Staff


class StaffMapper(RowMapper[Staff]):
    entity_class = Staff
    fields = (
        ("username", "username"),
        ("email", "email"),
        ("phone", "phone"),
        ("role", "role"),
        ("created_at", "created_at"),
        ("updated_at", "updated_at"),
    )

    def decode(self, row) -> Staff:
        data = row_mapping(row)
        return Staff(
            id=as_optional_int(data["id"]),
            username=data["username"],
            email=data["email"],
            phone=data["phone"],
            role=data["role"],
            created_at=as_datetime(data["created_at"]),
            updated_at=as_datetime(data["updated_at"]),
        )
