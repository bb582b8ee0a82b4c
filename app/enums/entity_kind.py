from enum import Enum
from typing import Tuple


class EntityKind(str, Enum):
    """Categories of data kept in an admin's private tables"""

    OCCUPANTS = "occupants"
    ROOMS = "rooms"
    STAFF = "staff"
    PAYMENTS = "payments"
    ATTENDANCE = "attendance"

    def __str__(self):
        return self.value

    @classmethod
    def ordered(cls) -> Tuple["EntityKind", ...]:
        """Provisioning order"""
        return (cls.OCCUPANTS, cls.ROOMS, cls.STAFF, cls.PAYMENTS, cls.ATTENDANCE)
