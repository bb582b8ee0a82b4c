from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from database.init import get_engine
from schemas.occupant_schema import OccupantCreate, OccupantUpdate
from services.occupant_service import OccupantService
from utils.dependencies import get_current_admin_id
from responses.success import created_response, data_response, success_response

router = APIRouter(prefix="/occupants", tags=["Occupants"])


def get_occupant_service(engine: Engine = Depends(get_engine)) -> OccupantService:
    return OccupantService(engine)


@router.get("/")
def get_occupants(
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    return data_response(occupant_service.get_all(admin_id))


@router.post("/", status_code=201)
def create_occupant(
    payload: OccupantCreate,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    """Adds an occupant and marks their bed as occupied in the room."""
    return created_response("Occupant created successfully", occupant_service.create(admin_id, payload))


@router.get("/search")
def search_occupants(
    name: str,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    return data_response(occupant_service.search_occupants(admin_id, name))


@router.get("/status/{status}")
def get_occupants_by_status(
    status: str,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    return data_response(occupant_service.get_occupants_by_status(admin_id, status))


@router.get("/room/{room_number}")
def get_occupants_by_room(
    room_number: str,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    return data_response(occupant_service.get_occupants_by_room(admin_id, room_number))


@router.get("/{occupant_id}")
def get_occupant(
    occupant_id: int,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    return data_response(occupant_service.get(admin_id, occupant_id))


@router.put("/{occupant_id}")
def update_occupant(
    occupant_id: int,
    payload: OccupantUpdate,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    return success_response(
        "Occupant updated successfully", occupant_service.update(admin_id, occupant_id, payload)
    )


@router.delete("/{occupant_id}")
def delete_occupant(
    occupant_id: int,
    admin_id: int = Depends(get_current_admin_id),
    occupant_service: OccupantService = Depends(get_occupant_service),
):
    occupant_service.delete(admin_id, occupant_id)
    return success_response("Occupant deleted successfully")
