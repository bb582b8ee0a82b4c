from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime


class Room(BaseModel):
    id: Optional[int] = None
    room_number: str
    capacity: Optional[int] = None
    occupied_beds: Optional[int] = None
    # numbers of the beds currently taken, e.g. [1, 3]
    occupied_bed_numbers: List[int] = []
    rent: float
    status: Optional[str] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class RoomCreate(BaseModel):
    room_number: str = Field(min_length=1)
    capacity: Optional[int] = Field(default=None, ge=1)
    occupied_beds: Optional[int] = Field(default=None, ge=0)
    rent: float = Field(gt=0)
    status: Optional[str] = None
    description: Optional[str] = None


class RoomUpdate(BaseModel):
    room_number: Optional[str] = Field(default=None, min_length=1)
    capacity: Optional[int] = Field(default=None, ge=1)
    occupied_beds: Optional[int] = Field(default=None, ge=0)
    rent: Optional[float] = Field(default=None, gt=0)
    status: Optional[str] = None
    description: Optional[str] = None
