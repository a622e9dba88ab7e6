# Medications Feature - Models

import datetime as dt
from typing import Optional, List
from beanie import Document
from pydantic import Field
from app.shared.models import TimestampMixin


class Medication(Document, TimestampMixin):
    """Medication document model. One prescription or self-medication course."""
    
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
    side_effects: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
    
    class Settings:
        name = "medications"
        use_state_management = True
        indexes = [
            "start_date",
            "prescribing_doctor_id",
        ]
