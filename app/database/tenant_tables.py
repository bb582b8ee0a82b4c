"""
Physical table naming and column definitions for per-admin tables.

Every admin owns one table per EntityKind, named ``tenant_<id>_<kind>``.
Only the integer admin id varies at runtime; the kind comes from a closed
enum, so a derived name is always safe to place in DDL/DML text.
"""
import re
from typing import Callable, Dict, List, Optional, Union

from sqlalchemy import (
    TIMESTAMP,
    BigInteger,
    Column,
    Date,
    Double,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects import mysql

from enums.entity_kind import EntityKind
from utils.exceptions import InvalidTenantIdError

TABLE_PREFIX = "tenant"

_DIGITS = re.compile(r"[0-9]+")

# BIGINT AUTO_INCREMENT on MySQL, rowid alias on SQLite
Id = BigInteger().with_variant(Integer(), "sqlite")
LongText = Text().with_variant(mysql.LONGTEXT(), "mysql")


def validate_tenant_id(tenant_id) -> int:
    """Return tenant_id unchanged if it is a strict positive int"""
    if isinstance(tenant_id, bool) or not isinstance(tenant_id, int) or tenant_id <= 0:
        raise InvalidTenantIdError(tenant_id)
    return tenant_id


def coerce_tenant_id(value: Union[int, str]) -> int:
    """Parse an admin id arriving from outside (token claim, path, header)"""
    if isinstance(value, str):
        if not _DIGITS.fullmatch(value):
            raise InvalidTenantIdError(value)
        value = int(value)
    return validate_tenant_id(value)


def table_name(tenant_id: int, kind: Union[EntityKind, str]) -> str:
    tenant_id = validate_tenant_id(tenant_id)
    kind = EntityKind(kind)
    return f"{TABLE_PREFIX}_{tenant_id}_{kind.value}"


def _timestamps() -> List[Column]:
    return [
        Column("created_at", TIMESTAMP, nullable=True, server_default=text("CURRENT_TIMESTAMP")),
        Column("updated_at", TIMESTAMP, nullable=True, server_default=text("CURRENT_TIMESTAMP")),
    ]


def _occupant_columns() -> list:
    return [
        Column("id", Id, primary_key=True, autoincrement=True),
        Column("name", String(255), nullable=False),
        Column("age", Integer, nullable=True),
        Column("gender", String(50), nullable=True),
        Column("phone", String(10), nullable=False, unique=True),
        Column("email", String(255), nullable=False),
        Column("room_number", String(50), nullable=False),
        Column("bed_number", Integer, nullable=True),
        Column("address", String(500), nullable=False),
        Column("joining_date", Date, nullable=False),
        Column("identity_proof_type", String(100), nullable=True),
        Column("identity_proof", LongText, nullable=True),
        Column("status", String(20), server_default=text("'ACTIVE'")),
        *_timestamps(),
    ]


def _room_columns() -> list:
    return [
        Column("id", Id, primary_key=True, autoincrement=True),
        Column("room_number", String(50), nullable=False, unique=True),
        Column("capacity", Integer, nullable=True),
        Column("occupied_beds", Integer, nullable=False, server_default=text("0")),
        Column("occupied_bed_numbers", Text, nullable=True),
        Column("rent", Double, nullable=False),
        Column("status", String(20), server_default=text("'AVAILABLE'")),
        Column("description", Text, nullable=True),
        *_timestamps(),
    ]


def _staff_columns() -> list:
    return [
        Column("id", Id, primary_key=True, autoincrement=True),
        Column("username", String(255), nullable=False, unique=True),
        Column("email", String(255), nullable=False, unique=True),
        Column("phone", String(10), nullable=True),
        Column("role", String(100), nullable=False),
        *_timestamps(),
    ]


def _payment_columns() -> list:
    return [
        Column("id", Id, primary_key=True, autoincrement=True),
        # id of the occupant who paid, if known
        Column("tenant_id", BigInteger, nullable=True),
        Column("student", String(255), nullable=False),
        Column("amount", Double, nullable=False),
        Column("payment_date", Date, nullable=False),
        Column("method", String(50), nullable=False),
        Column("status", String(50), nullable=True),
        Column("notes", Text, nullable=True),
        Column("transaction_id", String(255), nullable=True),
        Column("transaction_details", Text, nullable=True),
        *_timestamps(),
    ]


def _attendance_columns() -> list:
    return [
        Column("id", Id, primary_key=True, autoincrement=True),
        Column("student_name", String(255), nullable=False),
        Column("room_number", String(50), nullable=True),
        Column("date", Date, nullable=False),
        Column("status", String(20), nullable=False),
        Column("notes", Text, nullable=True),
        UniqueConstraint("student_name", "date"),
    ]


TABLE_COLUMNS: Dict[EntityKind, Callable[[], list]] = {
    EntityKind.OCCUPANTS: _occupant_columns,
    EntityKind.ROOMS: _room_columns,
    EntityKind.STAFF: _staff_columns,
    EntityKind.PAYMENTS: _payment_columns,
    EntityKind.ATTENDANCE: _attendance_columns,
}


def build_table(
    tenant_id: int, kind: Union[EntityKind, str], metadata: Optional[MetaData] = None
) -> Table:
    """Build the Core Table for one admin and one entity kind.

    A fresh MetaData is used unless one is passed in, so nothing about a
    tenant's schema is cached between calls.
    """
    kind = EntityKind(kind)
    if metadata is None:
        metadata = MetaData()
    return Table(table_name(tenant_id, kind), metadata, *TABLE_COLUMNS[kind]())
