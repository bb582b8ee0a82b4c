from mappers.base_mapper import (
    RowMapper,
    as_date,
    as_datetime,
    as_optional_float,
    as_optional_int,
    row_mapping,
)
from enums.payment_status import PaymentStatus
from schemas.payment_schema import Payment
from utils.id_generator import generate_transaction_details, generate_transaction_id


def _blank(value) -> bool:
    return value is None or not str(value).strip()


class PaymentMapper(RowMapper[Payment]):
    entity_class = Payment
    fields = (
        ("occupant_id", "tenant_id"),
        ("student", "student"),
        ("amount", "amount"),
        ("payment_date", "payment_date"),
        ("method", "method"),
        ("status", "status"),
        ("notes", "notes"),
        ("transaction_id", "transaction_id"),
        ("transaction_details", "transaction_details"),
        ("created_at", "created_at"),
        ("updated_at", "updated_at"),
    )

    def decode(self, row) -> Payment:
        data = row_mapping(row)
        return Payment(
            id=as_optional_int(data["id"]),
            occupant_id=as_optional_int(data["tenant_id"]),
            student=data["student"],
            amount=as_optional_float(data["amount"]),
            payment_date=as_date(data["payment_date"]),
            method=data["method"],
            status=data["status"],
            notes=data["notes"],
            transaction_id=data["transaction_id"],
            transaction_details=data["transaction_details"],
            created_at=as_datetime(data["created_at"]),
            updated_at=as_datetime(data["updated_at"]),
        )

    def apply_defaults(self, entity: Payment) -> Payment:
        if entity.status is None:
            entity.status = PaymentStatus.COMPLETED.value
        if _blank(entity.transaction_id):
            entity.transaction_id = generate_transaction_id()
        if _blank(entity.transaction_details):
            entity.transaction_details = generate_transaction_details(
                entity.amount, entity.student, entity.method, entity.payment_date
            )
        return entity
