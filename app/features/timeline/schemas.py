# Timeline Feature - Schemas
#
# A timeline entry is a tagged union on `kind`. Each variant carries its own
# typed source record in `data` and declares which filters apply to it.

import datetime as dt
from typing import Annotated, ClassVar, FrozenSet, List, Literal, Optional, Union
from pydantic import BaseModel, Field

from app.features.appointments.schemas import AppointmentResponse
from app.features.medications.schemas import MedicationResponse
from app.features.status.schemas import StatusResponse
from app.features.documents.schemas import DocumentResponse


Severity = Literal["low", "medium", "high", "critical"]


# ============== Relations & Payloads ==============

class TimelineRelations(BaseModel):
    """Cross-references carried by an entry, used for filtering and navigation."""
    doctor_id: Optional[str] = None
    appointment_id: Optional[str] = None
    medication_id: Optional[str] = None
    document_ids: Optional[List[str]] = None


class AppointmentData(AppointmentResponse):
    """Appointment record plus the resolved doctor name."""
    doctor_name: Optional[str] = None


class MedicationData(MedicationResponse):
    """Medication record plus the resolved prescribing doctor name."""
    doctor_name: Optional[str] = None


class DocumentData(DocumentResponse):
    """Document record plus the resolved doctor name."""
    doctor_name: Optional[str] = None


# ============== Timeline Entries ==============

class TimelineEntryBase(BaseModel):
    """Fields shared by every timeline entry."""
    
    # Filter capabilities, declared per kind
    HAS_DOCTOR_RELATION: ClassVar[bool] = False
    HAS_PAIN_LEVEL: ClassVar[bool] = False
    
    id: str
    date: dt.date
    time: Optional[str] = None
    title: str
    summary: str
    severity: Optional[Severity] = None
    relations: TimelineRelations = Field(default_factory=TimelineRelations)
    
    @property
    def pain_level(self) -> Optional[int]:
        """Pain level for kinds that have one, else None."""
        return None


class AppointmentEntry(TimelineEntryBase):
    HAS_DOCTOR_RELATION: ClassVar[bool] = True
    
    kind: Literal["appointment"] = "appointment"
    data: AppointmentData


class MedicationEntry(TimelineEntryBase):
    HAS_DOCTOR_RELATION: ClassVar[bool] = True
    
    kind: Literal["medication"] = "medication"
    data: MedicationData


class StatusTimelineEntry(TimelineEntryBase):
    HAS_PAIN_LEVEL: ClassVar[bool] = True
    
    kind: Literal["status"] = "status"
    data: StatusResponse
    
    @property
    def pain_level(self) -> Optional[int]:
        return self.data.pain_level


class DocumentEntry(TimelineEntryBase):
    HAS_DOCTOR_RELATION: ClassVar[bool] = True
    
    kind: Literal["document"] = "document"
    data: DocumentData


TimelineEntry = Annotated[
    Union[AppointmentEntry, MedicationEntry, StatusTimelineEntry, DocumentEntry],
    Field(discriminator="kind"),
]


# ============== Filters ==============

class TimelineFilter(BaseModel):
    """
    Timeline filter options. Every option is optional and criteria combine
    with AND.
    
    - start_date / end_date: inclusive bounds on the entry date
    - kinds: kinds to include; empty or None means all. Unknown tags match nothing.
    - doctor_id: narrows entries that carry a doctor; others pass through
    - min_pain_level / max_pain_level: narrow status entries; others pass through
    """
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    kinds: Optional[FrozenSet[str]] = None
    doctor_id: Optional[str] = None
    min_pain_level: Optional[int] = Field(None, ge=0, le=10)
    max_pain_level: Optional[int] = Field(None, ge=0, le=10)
    
    class Config:
        json_schema_extra = {
            "example": {
                "start_date": "2024-03-01",
                "end_date": "2024-03-31",
                "kinds": ["appointment", "status"],
                "doctor_id": "65f0c2a1e4b0a1b2c3d4e5f6",
                "min_pain_level": 5,
            }
        }
