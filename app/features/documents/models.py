# Documents Feature - Models

import datetime as dt
from typing import Optional, List
from beanie import Document
from pydantic import Field
from app.shared.models import TimestampMixin


class MedicalDocument(Document, TimestampMixin):
    """
    Medical document metadata.
    Findings, lab results, prescriptions, invoices, referral letters and
    imaging. The file itself lives at `file_path`.
    """
    
    type: str
    title: str
    description: Optional[str] = None
    
    file_path: str
    file_type: str  # pdf, jpg, png, ...
    file_size: Optional[int] = None
    
    date: dt.date
    doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    
    class Settings:
        name = "documents"
        use_state_management = True
        indexes = [
            "date",
            "doctor_id",
            "appointment_id",
        ]
