from enum import Enum


class RetentionPolicy(str, Enum):
    """What happens to an admin's tables when the admin is deleted"""

    RETAIN = "retain"
    DROP = "drop"
