from typing import List, Optional

from enums.entity_kind import EntityKind
from mappers.staff_mapper import StaffMapper
from repositories.base_repository import TenantRepository
from schemas.staff_schema import Staff


class StaffRepository(TenantRepository[Staff]):
    kind = EntityKind.STAFF
    mapper = StaffMapper()
    entity_name = "Staff"
    unique_fields = ("username", "email")

    def find_by_username(self, tenant_id: int, username: str) -> Optional[Staff]:
        return self._find_one_by(tenant_id, "username", username)

    def find_by_email(self, tenant_id: int, email: str) -> Optional[Staff]:
        return self._find_one_by(tenant_id, "email", email)

    def find_by_role(self, tenant_id: int, role: str) -> List[Staff]:
        return self._find_by(tenant_id, "role", role)
