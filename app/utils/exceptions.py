"""
Typed errors raised by the tenant data layer.

The HTTP layer maps these onto status codes; nothing below the routes
translates or swallows them.
"""
from typing import Iterable, Optional


def _kind_names(kinds: Iterable) -> list:
    return sorted(getattr(kind, "value", kind) for kind in kinds)


class PGManagerError(Exception):
    """Base class for all application errors"""


class InvalidTenantIdError(PGManagerError, ValueError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid tenant id: {value!r}")


class ProvisioningError(PGManagerError):
    def __init__(self, tenant_id: int, missing: Iterable = (), message: Optional[str] = None):
        self.tenant_id = tenant_id
        self.missing = _kind_names(missing)
        if message is None:
            message = f"Failed to create tables for admin {tenant_id}"
            if self.missing:
                message += f": missing {', '.join(self.missing)}"
        super().__init__(message)


class SchemaMissingError(PGManagerError):
    def __init__(self, tenant_id: int, missing: Iterable):
        self.tenant_id = tenant_id
        self.missing = _kind_names(missing)
        super().__init__(
            f"Tables missing for admin {tenant_id}: {', '.join(self.missing)}"
        )


class NotFoundError(PGManagerError):
    def __init__(self, entity: str, identifier):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} not found with id: {identifier}")


class DuplicateError(PGManagerError):
    def __init__(self, entity: str, field: str, value):
        self.entity = entity
        self.field = field
        self.value = value
        label = field.replace("_", " ").capitalize()
        super().__init__(f"{label} already exists")


class AuthenticationError(PGManagerError):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
