from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from database.models.admin_model import Admin
from database.provisioner import SchemaProvisioner
from schemas.admin_schema import AdminCreate, RepairResult, SetupStatus, TableInfo
from utils.dependencies import create_access_token, hash_password, verify_password
from utils.exceptions import AuthenticationError, DuplicateError, NotFoundError, ProvisioningError
from utils.logger import get_logger

logger = get_logger("services.admin")


def _names(kinds) -> List[str]:
    return sorted(kind.value for kind in kinds)


def _status_map(status) -> dict:
    return {kind.value: exists for kind, exists in status.items()}


class AdminService:
    """Admin registry plus the lifecycle of each admin's private tables"""

    def __init__(self, provisioner: SchemaProvisioner):
        self.provisioner = provisioner

    def get_admin(self, db: Session, admin_id: int) -> Admin:
        admin = db.query(Admin).filter(Admin.id == admin_id).first()
        if admin is None:
            raise NotFoundError("Admin", admin_id)
        return admin

    def get_admin_by_email(self, db: Session, email: str) -> Optional[Admin]:
        return db.query(Admin).filter(Admin.email == email).first()

    def register(self, db: Session, payload: AdminCreate) -> Tuple[Admin, SetupStatus]:
        if self.get_admin_by_email(db, payload.email):
            raise DuplicateError("Admin", "email", payload.email)

        admin = Admin(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            hostel_name=payload.hostel_name,
            hashed_password=hash_password(payload.password),
            is_active=True,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)
        logger.info(f"Registered admin {admin.id}", extra={"tenant_id": admin.id})

        return admin, self.setup_tables(admin.id)

    def setup_tables(self, admin_id: int) -> SetupStatus:
        """Provision at registration; a failure is reported, the registration stands"""
        error = None
        try:
            self.provisioner.provision_tenant(admin_id)
        except ProvisioningError as exc:
            logger.error(
                f"Failed to create tables for admin {admin_id}",
                exc_info=True,
                extra={"tenant_id": admin_id},
            )
            error = str(exc)

        status = self.provisioner.table_status(admin_id)
        return SetupStatus(
            tables_created=error is None,
            table_status=_status_map(status),
            missing_tables=_names(kind for kind, exists in status.items() if not exists),
            table_creation_error=error,
        )

    def authenticate(self, db: Session, email: str, password: str) -> Tuple[Admin, str, TableInfo]:
        admin = self.get_admin_by_email(db, email)
        if not admin or not admin.is_active or not verify_password(password, admin.hashed_password):
            raise AuthenticationError("Invalid credentials")

        missing = self.provisioner.missing_tables(admin.id)
        if missing:
            logger.warning(
                f"Admin {admin.id} is missing tables {_names(missing)}, creating them",
                extra={"tenant_id": admin.id},
            )
            try:
                self.provisioner.provision_tenant(admin.id, kinds=missing)
            except ProvisioningError:
                logger.error(
                    f"Could not create missing tables for admin {admin.id} at login",
                    exc_info=True,
                    extra={"tenant_id": admin.id},
                )

        token = create_access_token({"sub": admin.email, "admin_id": admin.id})
        return admin, token, self.table_info(admin.id)

    def table_info(self, admin_id: int) -> TableInfo:
        status = self.provisioner.table_status(admin_id)
        missing = _names(kind for kind, exists in status.items() if not exists)
        return TableInfo(
            all_tables_exist=not missing,
            table_status=_status_map(status),
            missing_tables=missing,
        )

    def repair_tables(self, admin_id: int) -> RepairResult:
        before = _names(self.provisioner.missing_tables(admin_id))
        self.provisioner.provision_tenant(admin_id)
        status = self.provisioner.table_status(admin_id)
        return RepairResult(
            missing_tables_before=before,
            missing_tables_after=_names(kind for kind, exists in status.items() if not exists),
            table_status=_status_map(status),
        )

    def delete_admin(self, db: Session, admin_id: int) -> bool:
        """Remove the admin. Returns True if its tables were dropped as well."""
        admin = self.get_admin(db, admin_id)
        db.delete(admin)
        db.commit()
        return self.provisioner.release_tenant(admin_id)

    def provision_existing_admins(self, db: Session) -> List[int]:
        """Create or verify tables for every registered admin. Returns the ids that failed."""
        failed = []
        for admin in db.query(Admin).order_by(Admin.id).all():
            try:
                self.provisioner.provision_tenant(admin.id)
            except ProvisioningError:
                logger.error(
                    f"Failed to create tables for admin {admin.id}",
                    exc_info=True,
                    extra={"tenant_id": admin.id},
                )
                failed.append(admin.id)
        logger.info(f"Table initialization complete, {len(failed)} admin(s) failed")
        return failed
