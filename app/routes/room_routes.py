from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from database.init import get_engine
from schemas.room_schema import RoomCreate, RoomUpdate
from services.room_service import RoomService
from utils.dependencies import get_current_admin_id
from responses.success import created_response, data_response, success_response

router = APIRouter(prefix="/rooms", tags=["Rooms"])


def get_room_service(engine: Engine = Depends(get_engine)) -> RoomService:
    return RoomService(engine)


@router.get("/")
def get_rooms(
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    return data_response(room_service.get_all(admin_id))


@router.post("/", status_code=201)
def create_room(
    payload: RoomCreate,
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    return created_response("Room created successfully", room_service.create(admin_id, payload))


@router.get("/status/{status}")
def get_rooms_by_status(
    status: str,
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    return data_response(room_service.get_rooms_by_status(admin_id, status))


@router.get("/number/{room_number}")
def get_room_by_number(
    room_number: str,
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    return data_response(room_service.get_room_by_number(admin_id, room_number))


@router.get("/{room_id}")
def get_room(
    room_id: int,
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    return data_response(room_service.get(admin_id, room_id))


@router.put("/{room_id}")
def update_room(
    room_id: int,
    payload: RoomUpdate,
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    return success_response("Room updated successfully", room_service.update(admin_id, room_id, payload))


@router.delete("/{room_id}")
def delete_room(
    room_id: int,
    admin_id: int = Depends(get_current_admin_id),
    room_service: RoomService = Depends(get_room_service),
):
    room_service.delete(admin_id, room_id)
    return success_response("Room deleted successfully")
