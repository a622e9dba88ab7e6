# Status Feature - Models

import datetime as dt
from typing import Optional, List
from beanie import Document
from pydantic import Field
from app.shared.models import TimestampMixin


class StatusEntry(Document, TimestampMixin):
    """
    Status entry document model.
    A daily check-in: pain level, symptoms, mood and free-text notes.
    """
    
    date: dt.date
    time: Optional[str] = None  # HH:MM
    
    pain_level: int = Field(..., ge=0, le=10)
    symptoms: List[str] = Field(default_factory=list)
    affected_areas: List[str] = Field(default_factory=list)
    
    general_condition: Optional[str] = None
    sleep: Optional[str] = None
    appetite: Optional[str] = None
    mood: Optional[str] = None  # good, okay, bad, terrible
    
    notes: Optional[str] = None
    content: Optional[str] = None  # Longer free-text journal body
    
    medications_taken: List[str] = Field(default_factory=list)
    document_ids: List[str] = Field(default_factory=list)
    
    class Settings:
        name = "status"
        use_state_management = True
        indexes = [
            [("date", -1), ("time", -1)],
        ]
