# Documents Feature - Schemas

import datetime as dt
from typing import ClassVar, Optional, Tuple
from pydantic import BaseModel, Field
from app.shared.schemas import PartialUpdate, StringList


class DocumentCreate(BaseModel):
    """Schema for registering a document."""
    type: str = Field(..., min_length=1, description="e.g. finding, lab, prescription, invoice, referral, imaging")
    title: str = Field(..., min_length=1, max_length=300)
    description: Optional[str] = None
    file_path: str = Field(..., min_length=1)
    file_type: str = Field(..., min_length=1)
    file_size: Optional[int] = Field(None, ge=0)
    date: dt.date
    doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    tags: StringList = Field(default_factory=list)


class DocumentUpdate(PartialUpdate):
    """Schema for updating a document. Only supplied fields change."""
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ("type", "title", "file_path", "file_type", "date", "tags")
    
    type: Optional[str] = Field(None, min_length=1)
    title: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = None
    file_path: Optional[str] = Field(None, min_length=1)
    file_type: Optional[str] = Field(None, min_length=1)
    file_size: Optional[int] = Field(None, ge=0)
    date: Optional[dt.date] = None
    doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    tags: Optional[StringList] = None


class DocumentResponse(BaseModel):
    """Schema for document response."""
    id: str
    type: str
    title: str
    description: Optional[str] = None
    file_path: str = ""
    file_type: str = ""
    file_size: Optional[int] = None
    date: dt.date
    doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    tags: StringList = []
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None
