# Appointments Feature - Models

import datetime as dt
from typing import Optional, List
from beanie import Document, Indexed
from pydantic import Field
from app.shared.models import TimestampMixin


class Appointment(Document, TimestampMixin):
    """
    Appointment document model.
    A visit or contact with a doctor: what it was about, what was found,
    and which documents came out of it.
    """
    
    date: dt.date
    time: Optional[str] = None  # HH:MM
    
    doctor_id: Indexed(str)
    
    # consultation, treatment, followup, emergency, surgery, imaging, phone, email
    type: str
    reason: str
    
    findings: Optional[str] = None
    diagnosis: Optional[str] = None
    recommendations: List[str] = Field(default_factory=list)
    prescriptions: List[str] = Field(default_factory=list)
    document_ids: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    follow_up_date: Optional[dt.date] = None
    
    class Settings:
        name = "appointments"
        use_state_management = True
        indexes = [
            "date",
            [("doctor_id", 1), ("date", -1)],
        ]
