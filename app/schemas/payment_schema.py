from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import date, datetime


class Payment(BaseModel):
    id: Optional[int] = None
    occupant_id: Optional[int] = None
    # name of whoever paid
    student: str
    amount: float
    payment_date: date
    method: str
    status: Optional[str] = None
    notes: Optional[str] = None
    transaction_id: Optional[str] = None
    transaction_details: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentCreate(BaseModel):
    occupant_id: Optional[int] = None
    student: str = Field(min_length=1)
    amount: float = Field(gt=0)
    payment_date: date
    method: str = Field(min_length=1)
    status: Optional[str] = None
    notes: Optional[str] = None
    transaction_id: Optional[str] = None
    transaction_details: Optional[str] = None


class PaymentUpdate(BaseModel):
    occupant_id: Optional[int] = None
    student: Optional[str] = Field(default=None, min_length=1)
    amount: Optional[float] = Field(default=None, gt=0)
    payment_date: Optional[date] = None
    method: Optional[str] = None
    status: Optional[str] = None
    notes: Optional[str] = None
