# Medications Feature - Schemas

import datetime as dt
from typing import ClassVar, Optional, Tuple
from pydantic import BaseModel, Field
from app.shared.schemas import PartialUpdate, StringList


class MedicationCreate(BaseModel):
    """Schema for creating a medication."""
    name: str = Field(..., min_length=1, max_length=200)
    generic_name: Optional[str] = None
    dosage: str = Field(..., min_length=1, description="e.g. 400mg")
    frequency: str = Field(..., min_length=1, description="e.g. 3x daily")
    route: str = "oral"
    prescribing_doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    start_date: dt.date
    end_date: Optional[dt.date] = None
    is_active: bool = True
    purpose: Optional[str] = None
    effects: Optional[str] = None
    side_effects: StringList = Field(default_factory=list)
    notes: Optional[str] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "Ibuprofen",
                "dosage": "400mg",
                "frequency": "3x daily",
                "start_date": "2024-03-01",
                "purpose": "Pain relief",
            }
        }


class MedicationUpdate(PartialUpdate):
    """Schema for updating a medication. Only supplied fields change."""
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "name", "dosage", "frequency", "route", "start_date", "is_active", "side_effects",
    )
    
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    generic_name: Optional[str] = None
    dosage: Optional[str] = Field(None, min_length=1)
    frequency: Optional[str] = Field(None, min_length=1)
    route: Optional[str] = None
    prescribing_doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    is_active: Optional[bool] = None
    purpose: Optional[str] = None
    effects: Optional[str] = None
    side_effects: Optional[StringList] = None
    notes: Optional[str] = None


class MedicationResponse(BaseModel):
    """Schema for medication response."""
    id: str
    name: str
    generic_name: Optional[str] = None
    dosage: str
    frequency: str
    route: str = "oral"
    prescribing_doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    start_date: dt.date
    end_date: Optional[dt.date] = None
    is_active: bool = True
    purpose: Optional[str] = None
    effects: Optional[str] = None
    side_effects: StringList = []
    notes: Optional[str] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
