from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from database.init import get_engine
from schemas.staff_schema import StaffCreate, StaffUpdate
from services.staff_service import StaffService
from utils.dependencies import get_current_admin_id
from responses.success import created_response, data_response, success_response

router = APIRouter(prefix="/staff", tags=["Staff"])


def get_staff_service(engine: Engine = Depends(get_engine)) -> StaffService:
    return StaffService(engine)


@router.get("/")
def get_staff(
    admin_id: int = Depends(get_current_admin_id),
    staff_service: StaffService = Depends(get_staff_service),
):
    return data_response(staff_service.get_all(admin_id))


@router.post("/", status_code=201)
def create_staff(
    payload: StaffCreate,
    admin_id: int = Depends(get_current_admin_id),
    staff_service: StaffService = Depends(get_staff_service),
):
    return created_response("Staff created successfully", staff_service.create(admin_id, payload))


@router.get("/role/{role}")
def get_staff_by_role(
    role: str,
    admin_id: int = Depends(get_current_admin_id),
    staff_service: StaffService = Depends(get_staff_service),
):
    return data_response(staff_service.get_staff_by_role(admin_id, role))


@router.get("/{staff_id}")
def get_staff_member(
    staff_id: int,
    admin_id: int = Depends(get_current_admin_id),
    staff_service: StaffService = Depends(get_staff_service),
):
    return data_response(staff_service.get(admin_id, staff_id))


@router.put("/{staff_id}")
def update_staff(
    staff_id: int,
    payload: StaffUpdate,
    admin_id: int = Depends(get_current_admin_id),
    staff_service: StaffService = Depends(get_staff_service),
):
    return success_response("Staff updated successfully", staff_service.update(admin_id, staff_id, payload))


@router.delete("/{staff_id}")
def delete_staff(
    staff_id: int,
    admin_id: int = Depends(get_current_admin_id),
    staff_service: StaffService = Depends(get_staff_service),
):
    staff_service.delete(admin_id, staff_id)
    return success_response("Staff deleted successfully")
