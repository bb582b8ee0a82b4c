from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from database.models.admin_model import Admin
from database.provisioner import SchemaProvisioner
from schemas.admin_schema import AdminCreate, AdminResponse, LoginRequest
from services.admin_service import AdminService
from utils.dependencies import get_current_admin, get_provisioner
from responses.success import created_response, data_response, success_response

router = APIRouter(prefix="/admin", tags=["Admin"])


def get_admin_service(provisioner: SchemaProvisioner = Depends(get_provisioner)) -> AdminService:
    return AdminService(provisioner)


@router.post("/register")
def register(
    payload: AdminCreate,
    db: Session = Depends(get_db),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Registers an admin and creates its dedicated tables."""
    admin, setup_status = admin_service.register(db, payload)
    message = "Admin registered successfully"
    if not setup_status.tables_created:
        message = (
            "Admin registered but table creation failed. "
            "Use the create-tables option to retry."
        )
    return created_response(
        message,
        {
            "admin": AdminResponse.model_validate(admin).model_dump(mode="json"),
            "setup_status": setup_status.model_dump(mode="json"),
        },
    )


@router.post("/login")
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    admin_service: AdminService = Depends(get_admin_service),
):
    admin, token, table_info = admin_service.authenticate(db, credentials.email, credentials.password)
    return data_response(
        {
            "access_token": token,
            "token_type": "bearer",
            "admin": AdminResponse.model_validate(admin).model_dump(mode="json"),
            "table_info": table_info.model_dump(mode="json"),
        }
    )


@router.get("/profile")
def get_profile(
    current_admin: Admin = Depends(get_current_admin),
    admin_service: AdminService = Depends(get_admin_service),
):
    return data_response(
        {
            "admin": AdminResponse.model_validate(current_admin).model_dump(mode="json"),
            "table_info": admin_service.table_info(current_admin.id).model_dump(mode="json"),
        }
    )


@router.get("/tables")
def get_table_status(
    current_admin: Admin = Depends(get_current_admin),
    admin_service: AdminService = Depends(get_admin_service),
):
    return data_response(admin_service.table_info(current_admin.id))


@router.post("/create-tables")
def create_tables(
    current_admin: Admin = Depends(get_current_admin),
    admin_service: AdminService = Depends(get_admin_service),
):
    """Creates whatever tables the current admin is missing."""
    result = admin_service.repair_tables(current_admin.id)
    return success_response(f"Tables created successfully for admin {current_admin.id}", result)


@router.delete("/me")
def delete_account(
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
    admin_service: AdminService = Depends(get_admin_service),
):
    tables_dropped = admin_service.delete_admin(db, current_admin.id)
    return success_response("Admin deleted successfully", {"tables_dropped": tables_dropped})
