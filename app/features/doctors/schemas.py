# Doctors Feature - Schemas

from typing import ClassVar, Optional, Tuple, Union
from datetime import date, datetime
from pydantic import BaseModel, Field
from app.shared.schemas import PartialUpdate


class Address(BaseModel):
    """Structured practice address. Free text is accepted wherever this is."""
    street: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None


class DoctorCreate(BaseModel):
    """Schema for creating a doctor."""
    name: str = Field(..., min_length=1, max_length=200)
    specialty: str = Field(..., min_length=1, max_length=200)
    clinic: Optional[str] = None
    address: Optional[Union[Address, str]] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = None
    notes: Optional[str] = None
    first_visit: Optional[date] = None
    is_active: bool = True


class DoctorUpdate(PartialUpdate):
    """Schema for updating a doctor. Only supplied fields change."""
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "specialty", "is_active")
    
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    specialty: Optional[str] = Field(None, min_length=1, max_length=200)
    clinic: Optional[str] = None
    address: Optional[Union[Address, str]] = None
    phone: Optional[str] = Field(None, max_length=50)
    email: Optional[str] = None
    notes: Optional[str] = None
    first_visit: Optional[date] = None
    is_active: Optional[bool] = None


class DoctorResponse(BaseModel):
    """Schema for doctor response."""
    id: str
    name: str
    specialty: str
    clinic: Optional[str] = None
    address: Optional[Union[Address, str]] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    first_visit: Optional[date] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
