# Status Feature - Schemas

import datetime as dt
from typing import ClassVar, List, Optional, Tuple
from pydantic import BaseModel, Field
from app.shared.schemas import PartialUpdate, StringList, TIME_PATTERN


MOODS = ("good", "okay", "bad", "terrible")


class StatusCreate(BaseModel):
    """Schema for creating a status entry."""
    date: dt.date
    time: Optional[str] = Field(None, pattern=TIME_PATTERN, description="HH:MM or HH:MM:SS")
    pain_level: int = Field(..., ge=0, le=10, description="0 = no pain, 10 = worst imaginable")
    symptoms: StringList = Field(default_factory=list)
    affected_areas: StringList = Field(default_factory=list)
    general_condition: Optional[str] = None
    sleep: Optional[str] = None
    appetite: Optional[str] = None
    mood: Optional[str] = Field(None, description=f"One of {', '.join(MOODS)} or a custom tag")
    notes: Optional[str] = None
    content: Optional[str] = None
    medications_taken: StringList = Field(default_factory=list)
    document_ids: List[str] = Field(default_factory=list)
    
    class Config:
        json_schema_extra = {
            "example": {
                "date": "2024-03-02",
                "time": "08:15",
                "pain_level": 6,
                "symptoms": ["stiffness", "headache"],
                "mood": "okay",
                "content": "Slept badly, stiffness eased after a walk.",
            }
        }


class StatusUpdate(PartialUpdate):
    """Schema for updating a status entry. Only supplied fields change."""
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = (
        "date", "pain_level", "symptoms", "affected_areas", "medications_taken", "document_ids",
    )
    
    date: Optional[dt.date] = None
    time: Optional[str] = Field(None, pattern=TIME_PATTERN)
    pain_level: Optional[int] = Field(None, ge=0, le=10)
    symptoms: Optional[StringList] = None
    affected_areas: Optional[StringList] = None
    general_condition: Optional[str] = None
    sleep: Optional[str] = None
    appetite: Optional[str] = None
    mood: Optional[str] = None
    notes: Optional[str] = None
    content: Optional[str] = None
    medications_taken: Optional[StringList] = None
    document_ids: Optional[List[str]] = None


class StatusResponse(BaseModel):
    """Schema for status entry response."""
    id: str
    date: dt.date
    time: Optional[str] = None
    pain_level: int = Field(..., ge=0, le=10)
    symptoms: StringList = []
    affected_areas: StringList = []
    general_condition: Optional[str] = None
    sleep: Optional[str] = None
    appetite: Optional[str] = None
    mood: Optional[str] = None
    notes: Optional[str] = None
    content: Optional[str] = None
    medications_taken: StringList = []
    document_ids: List[str] = []
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
