# Appointments Feature - Schemas

import datetime as dt
from typing import ClassVar, List, Optional, Tuple
from pydantic import BaseModel, Field
from app.shared.schemas import PartialUpdate, StringList, TIME_PATTERN


APPOINTMENT_TYPES = (
    "consultation",
    "treatment",
    "followup",
    "emergency",
    "surgery",
    "imaging",
    "phone",
    "email",
)


class AppointmentCreate(BaseModel):
    """Schema for creating an appointment."""
    date: dt.date
    time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="HH:MM or HH:MM:SS")
    doctor_id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, description=f"One of {', '.join(APPOINTMENT_TYPES)} or a custom tag")
    reason: str = Field(..., min_length=1)
    findings: Optional[str] = None
    diagnosis: Optional[str] = None
    recommendations: StringList = Field(default_factory=list)
    prescriptions: StringList = Field(default_factory=list)
    document_ids: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    follow_up_date: Optional[dt.date] = None
    
    class Config:
        json_schema_extra = {
            "example": {
                "date": "2024-03-01",
                "time": "09:30",
                "doctor_id": "65f0c2a1e4b0a1b2c3d4e5f6",
                "type": "consultation",
                "reason": "Lower back pain",
                "findings": "Muscular tension, no disc involvement",
                "recommendations": ["Physiotherapy 6x", "Heat"],
            }
        }


class AppointmentUpdate(PartialUpdate):
    """Schema for updating an appointment. Only supplied fields change."""
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "date", "doctor_id", "type", "reason",
        "recommendations", "prescriptions", "document_ids",
    )
    
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    doctor_id: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = Field(None, min_length=1)
    reason: Optional[str] = Field(None, min_length=1)
    findings: Optional[str] = None
    diagnosis: Optional[str] = None
    recommendations: Optional[StringList] = None
    prescriptions: Optional[StringList] = None
    document_ids: Optional[List[str]] = None
    notes: Optional[str] = None
    follow_up_date: Optional[dt.date] = None


class AppointmentResponse(BaseModel):
    """Schema for appointment response."""
    id: str
    date: dt.date
    time: Optional[str] = None
    doctor_id: str
    type: str
    reason: str
    findings: Optional[str] = None
    diagnosis: Optional[str] = None
    recommendations: StringList = []
    prescriptions: StringList = []
    document_ids: List[str] = []
    notes: Optional[str] = None
    follow_up_date: Optional[dt.date] = None
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
