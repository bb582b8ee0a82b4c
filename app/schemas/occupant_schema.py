from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import date, datetime


class Occupant(BaseModel):
    """A person staying in one of the admin's rooms, as stored in their table"""

    id: Optional[int] = None
    name: str
    age: Optional[int] = None
    gender: Optional[str] = None
    phone: str
    email: str
    room_number: str
    bed_number: Optional[int] = None
    address: str
    joining_date: date
    identity_proof_type: Optional[str] = None
    identity_proof: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class OccupantCreate(BaseModel):
    name: str = Field(min_length=1)
    age: Optional[int] = Field(default=None, ge=18, le=100)
    gender: Optional[str] = None
    phone: str = Field(pattern=r"^[0-9]{10}$")
    email: EmailStr
    room_number: str = Field(min_length=1)
    bed_number: Optional[int] = Field(default=None, ge=1)
    address: str = Field(min_length=1)
    joining_date: date
    identity_proof_type: Optional[str] = None
    identity_proof: Optional[str] = None
    status: Optional[str] = None


class OccupantUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    age: Optional[int] = Field(default=None, ge=18, le=100)
    gender: Optional[str] = None
    phone: Optional[str] = Field(default=None, pattern=r"^[0-9]{10}$")
    email: Optional[EmailStr] = None
    room_number: Optional[str] = Field(default=None, min_length=1)
    bed_number: Optional[int] = Field(default=None, ge=1)
    address: Optional[str] = Field(default=None, min_length=1)
    joining_date: Optional[date] = None
    identity_proof_type: Optional[str] = None
    identity_proof: Optional[str] = None
    status: Optional[str] = None
