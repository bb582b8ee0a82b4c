from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime


class Staff(BaseModel):
    id: Optional[int] = None
    username: str
    email: str
    phone: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class StaffCreate(BaseModel):
    username: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = Field(default=None, pattern=r"^[0-9]{10}$")
    role: str = Field(min_length=1)


class StaffUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, pattern=r"^[0-9]{10}$")
    role: Optional[str] = None
