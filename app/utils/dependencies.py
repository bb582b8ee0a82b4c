from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from datetime import datetime, timedelta, timezone
from typing import Optional

from database.init import get_db, get_engine
from database.models.admin_model import Admin
from database.provisioner import SchemaProvisioner
from database.tenant_tables import coerce_tenant_id
from config import ALGORITHM, SECRET_KEY, ACCESS_TOKEN_EXPIRE_MINUTES, VERIFY_TABLES_ON_REQUEST
from utils.exceptions import AuthenticationError, InvalidTenantIdError

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/admin/login")
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password):
    return pwd_context.hash(password)


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None):
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def get_provisioner(engine: Engine = Depends(get_engine)) -> SchemaProvisioner:
    return SchemaProvisioner(engine)


def get_current_admin(
    token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)
) -> Admin:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        admin_id = coerce_tenant_id(str(payload.get("admin_id", "")))
    except (JWTError, InvalidTenantIdError):
        raise AuthenticationError("Invalid provided token")

    admin = db.query(Admin).filter(Admin.id == admin_id).first()
    if admin is None or not admin.is_active:
        raise AuthenticationError("Admin not found")
    return admin


def get_current_admin_id(
    admin: Admin = Depends(get_current_admin),
    provisioner: SchemaProvisioner = Depends(get_provisioner),
) -> int:
    """The admin id every tenant-scoped route passes down explicitly"""
    admin_id = coerce_tenant_id(admin.id)
    if VERIFY_TABLES_ON_REQUEST:
        provisioner.require_tables(admin_id)
    return admin_id
