from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from database.init import get_engine
from schemas.payment_schema import PaymentCreate, PaymentUpdate
from services.payment_service import PaymentService
from utils.dependencies import get_current_admin_id
from responses.error import bad_request_error
from responses.success import created_response, data_response, success_response

router = APIRouter(prefix="/payments", tags=["Payments"])


def get_payment_service(engine: Engine = Depends(get_engine)) -> PaymentService:
    return PaymentService(engine)


@router.get("/")
def get_payments(
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return data_response(payment_service.get_all(admin_id))


@router.post("/", status_code=201)
def create_payment(
    payload: PaymentCreate,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    """Records a payment; transaction id and details are generated when left blank."""
    return created_response("Payment recorded successfully", payment_service.create(admin_id, payload))


@router.get("/date-range")
def get_payments_by_date_range(
    start_date: date,
    end_date: date,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    if start_date > end_date:
        return bad_request_error("start_date must not be after end_date")
    return data_response(payment_service.get_payments_by_date_range(admin_id, start_date, end_date))


@router.get("/occupant/{occupant_id}")
def get_payments_for_occupant(
    occupant_id: int,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return data_response(payment_service.get_payments_for_occupant(admin_id, occupant_id))


@router.get("/status/{status}")
def get_payments_by_status(
    status: str,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return data_response(payment_service.get_payments_by_status(admin_id, status))


@router.get("/student/{student}")
def get_payments_by_student(
    student: str,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return data_response(payment_service.get_payments_by_student(admin_id, student))


@router.get("/method/{method}")
def get_payments_by_method(
    method: str,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return data_response(payment_service.get_payments_by_method(admin_id, method))


@router.get("/{payment_id}")
def get_payment(
    payment_id: int,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return data_response(payment_service.get(admin_id, payment_id))


@router.put("/{payment_id}")
def update_payment(
    payment_id: int,
    payload: PaymentUpdate,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    return success_response(
        "Payment updated successfully", payment_service.update(admin_id, payment_id, payload)
    )


@router.delete("/{payment_id}")
def delete_payment(
    payment_id: int,
    admin_id: int = Depends(get_current_admin_id),
    payment_service: PaymentService = Depends(get_payment_service),
):
    payment_service.delete(admin_id, payment_id)
    return success_response("Payment deleted successfully")
