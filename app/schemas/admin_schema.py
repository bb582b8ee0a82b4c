from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Dict, List, Optional
from datetime import datetime


class AdminCreate(BaseModel):
    name: str
    email: EmailStr
    password: str
    phone: Optional[str] = None
    hostel_name: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AdminResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    hostel_name: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TableInfo(BaseModel):
    all_tables_exist: bool
    table_status: Dict[str, bool]
    missing_tables: List[str] = []


class SetupStatus(BaseModel):
    tables_created: bool
    table_status: Dict[str, bool]
    missing_tables: List[str] = []
    table_creation_error: Optional[str] = None


class RepairResult(BaseModel):
    missing_tables_before: List[str]
    missing_tables_after: List[str]
    table_status: Dict[str, bool]
