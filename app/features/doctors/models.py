# Doctors Feature - Models

from typing import Optional, Union
from datetime import date
from beanie import Document, Indexed
from app.shared.models import TimestampMixin
from app.features.doctors.schemas import Address


class Doctor(Document, TimestampMixin):
    """
    Doctor document model.
    A physician or therapist the user sees. Appointments, medications and
    documents reference a doctor by id.
    """
    
    name: Indexed(str)
    specialty: str
    
    # Practice details
    clinic: Optional[str] = None
    address: Optional[Union[Address, str]] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    
    notes: Optional[str] = None
    first_visit: Optional[date] = None
    
    is_active: bool = True
    
    class Settings:
        name = "doctors"
        use_state_management = True
    
    class Config:
        json_schema_extra = {
            "example": {
                "name": "Dr. Anna Weber",
                "specialty": "Orthopedics",
                "clinic": "Praxis am Markt",
                "address": {"street": "Marktplatz 3", "city": "Freiburg", "zip": "79098"},
                "phone": "+49 761 123456",
                "is_active": True,
            }
        }
