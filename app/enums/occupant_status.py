from enum import Enum


class OccupantStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    VACATED = "VACATED"
