from datetime import date
from typing import List

from sqlalchemy.engine import Engine

from repositories.payment_repository import PaymentRepository
from schemas.payment_schema import Payment
from services.base_service import BaseService


class PaymentService(BaseService[Payment]):
    def __init__(self, engine: Engine):
        super().__init__(PaymentRepository(engine))

    def get_payments_for_occupant(self, tenant_id: int, occupant_id: int) -> List[Payment]:
        return self.repository.find_by_occupant(tenant_id, occupant_id)

    def get_payments_by_status(self, tenant_id: int, status: str) -> List[Payment]:
        return self.repository.find_by_status(tenant_id, status)

    def get_payments_by_date_range(self, tenant_id: int, start_date: date, end_date: date) -> List[Payment]:
        return self.repository.find_by_date_range(tenant_id, start_date, end_date)

    def get_payments_by_student(self, tenant_id: int, student: str) -> List[Payment]:
        return self.repository.find_by_student(tenant_id, student)

    def get_payments_by_method(self, tenant_id: int, method: str) -> List[Payment]:
        return self.repository.find_by_method(tenant_id, method)
