from typing import List

from sqlalchemy.engine import Engine

from repositories.staff_repository import StaffRepository
from schemas.staff_schema import Staff
from services.base_service import BaseService


class StaffService(BaseService[Staff]):
    def __init__(self, engine: Engine):
        super().__init__(StaffRepository(engine))

    def get_staff_by_role(self, tenant_id: int, role: str) -> List[Staff]:
        return self.repository.find_by_role(tenant_id, role)
