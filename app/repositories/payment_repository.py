from datetime import date
from typing import List

from sqlalchemy import select

from enums.entity_kind import EntityKind
from mappers.payment_mapper import PaymentMapper
from repositories.base_repository import TenantRepository
from schemas.payment_schema import Payment


class PaymentRepository(TenantRepository[Payment]):
    kind = EntityKind.PAYMENTS
    mapper = PaymentMapper()
    entity_name = "Payment"

    def find_by_student(self, tenant_id: int, student: str) -> List[Payment]:
        return self._find_by(tenant_id, "student", student)

    def find_by_method(self, tenant_id: int, method: str) -> List[Payment]:
        return self._find_by(tenant_id, "method", method)

    def find_by_status(self, tenant_id: int, status: str) -> List[Payment]:
        return self._find_by(tenant_id, "status", status)

    def find_by_occupant(self, tenant_id: int, occupant_id: int) -> List[Payment]:
        return self._find_by(tenant_id, "occupant_id", occupant_id)

    def find_by_date_range(self, tenant_id: int, start_date: date, end_date: date) -> List[Payment]:
        """Payments dated between start_date and end_date, both inclusive"""
        table = self.table(tenant_id)
        return self._query(
            select(table)
            .where(table.c.payment_date.between(start_date, end_date))
            .order_by(table.c.payment_date, table.c.id)
        )
