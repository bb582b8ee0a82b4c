from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar

from dateutil import parser as date_parser
from pydantic import BaseModel

EntityType = TypeVar("EntityType", bound=BaseModel)


def row_mapping(row) -> Mapping[str, Any]:
    """Accept a SQLAlchemy Row or any plain mapping"""
    return row._mapping if hasattr(row, "_mapping") else row


def as_optional_int(value) -> Optional[int]:
    # NULL stays absent, never 0
    if value is None:
        return None
    return int(value)


def as_optional_float(value) -> Optional[float]:
    if value is None:
        return None
    return float(value)


def as_date(value) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(str(value)).date()


def as_datetime(value) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())
    return date_parser.parse(str(value))


class RowMapper(ABC, Generic[EntityType]):
    """
    Maps rows of one kind of tenant table to records and back.

    ``fields`` lists (record attribute, column) pairs in column order,
    without the primary key. The insert path binds all of them; the
    update path binds all but ``created_at``.
    """

    entity_class: Type[EntityType]
    fields: Tuple[Tuple[str, str], ...] = ()

    @abstractmethod
    def decode(self, row) -> EntityType:
        """Build a record from one row of this kind's table"""

    def is_new(self, entity: EntityType) -> bool:
        return entity.id is None

    def apply_defaults(self, entity: EntityType) -> EntityType:
        """Fill in values the insert path synthesizes when they are absent"""
        return entity

    def encode_value(self, attribute: str, value):
        return value

    def bind_parameters(self, entity: EntityType) -> Dict[str, Any]:
        return {
            column: self.encode_value(attribute, getattr(entity, attribute))
            for attribute, column in self.fields
        }

    def bind_update(self, entity: EntityType) -> Dict[str, Any]:
        params = self.bind_parameters(entity)
        params.pop("created_at", None)
        return params

    def column_for(self, attribute: str) -> str:
        for name, column in self.fields:
            if name == attribute:
                return column
        raise KeyError(attribute)
