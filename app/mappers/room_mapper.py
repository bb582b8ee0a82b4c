import json
from typing import List

from mappers.base_mapper import (
    RowMapper,
    as_datetime,
    as_optional_float,
    as_optional_int,
    row_mapping,
)
from enums.room_status import RoomStatus
from schemas.room_schema import Room
from utils.logger import get_logger

logger = get_logger("mappers.room")


def decode_bed_numbers(raw) -> List[int]:
    if raw is None or raw == "":
        return []
    try:
        numbers = json.loads(raw)
        return sorted({int(number) for number in numbers})
    except (TypeError, ValueError):
        logger.warning(f"Ignoring malformed occupied bed numbers: {raw!r}")
        return []


def encode_bed_numbers(numbers) -> str:
    return json.dumps(sorted(set(numbers or [])))


class RoomMapper(RowMapper[Room]):
    entity_class = Room
    fields = (
        ("room_number", "room_number"),
        ("capacity", "capacity"),
        ("occupied_beds", "occupied_beds"),
        ("occupied_bed_numbers", "occupied_bed_numbers"),
        ("rent", "rent"),
        ("status", "status"),
        ("description", "description"),
        ("created_at", "created_at"),
        ("updated_at", "updated_at"),
    )

    def decode(self, row) -> Room:
        data = row_mapping(row)
        return Room(
            id=as_optional_int(data["id"]),
            room_number=data["room_number"],
            capacity=as_optional_int(data["capacity"]),
            occupied_beds=as_optional_int(data["occupied_beds"]),
            occupied_bed_numbers=decode_bed_numbers(data["occupied_bed_numbers"]),
            rent=as_optional_float(data["rent"]),
            status=data["status"],
            description=data["description"],
            created_at=as_datetime(data["created_at"]),
            updated_at=as_datetime(data["updated_at"]),
        )

    def apply_defaults(self, entity: Room) -> Room:
        if entity.status is None:
            entity.status = RoomStatus.AVAILABLE.value
        if entity.occupied_beds is None:
            entity.occupied_beds = 0
        return entity

    def encode_value(self, attribute: str, value):
        if attribute == "occupied_bed_numbers":
            return encode_bed_numbers(value)
        return value
