"""
Timeline aggregation.

Merges appointments, medications, status entries and documents into one
feed, newest first. The pipeline is:

1. index doctors by id (only used to resolve display names)
2. project every record into a TimelineEntry of its kind
3. concatenate the projections
4. drop entries that fail a filter criterion
5. sort by date + time of day, descending

Everything here is a pure function over records that are already loaded;
nothing is fetched and inputs are never modified.
"""

import re
from datetime import datetime, time, timezone
from typing import Dict, Iterable, List, Optional

from app.features.doctors.schemas import DoctorResponse
from app.features.appointments.schemas import AppointmentResponse
from app.features.medications.schemas import MedicationResponse
from app.features.status.schemas import StatusResponse
from app.features.documents.schemas import DocumentResponse
from app.features.timeline.schemas import (
    AppointmentData,
    AppointmentEntry,
    DocumentData,
    DocumentEntry,
    MedicationData,
    MedicationEntry,
    Severity,
    StatusTimelineEntry,
    TimelineEntry,
    TimelineFilter,
    TimelineRelations,
)


UNKNOWN_DOCTOR = "Unknown"
SUMMARY_FALLBACK_LENGTH = 100

_TIME_OF_DAY = re.compile(r"(\d+):(\d+)(?::(\d+))?")


# ============== Projection ==============

def pain_severity(pain_level: int) -> Severity:
    """Bucket a 0-10 pain level: 0-3 low, 4-6 medium, 7-8 high, 9-10 critical."""
    if pain_level <= 3:
        return "low"
    if pain_level <= 6:
        return "medium"
    if pain_level <= 8:
        return "high"
    return "critical"


def _doctor_name(doctor_id: Optional[str], doctors: Dict[str, DoctorResponse]) -> Optional[str]:
    if not doctor_id:
        return None
    doctor = doctors.get(doctor_id)
    return doctor.name if doctor else None


def project_appointment(
    appointment: AppointmentResponse,
    doctors: Dict[str, DoctorResponse],
) -> AppointmentEntry:
    doctor_name = _doctor_name(appointment.doctor_id, doctors)
    summary = appointment.reason
    if appointment.findings:
        summary += f" - {appointment.findings}"

    return AppointmentEntry(
        id=appointment.id,
        date=appointment.date,
        time=appointment.time,
        title=f"Appointment: {doctor_name or UNKNOWN_DOCTOR}",
        summary=summary,
        relations=TimelineRelations(
            doctor_id=appointment.doctor_id,
            appointment_id=appointment.id,
            document_ids=list(appointment.document_ids),
        ),
        data=AppointmentData.model_validate({**appointment.model_dump(), "doctor_name": doctor_name}),
    )


def project_medication(
    medication: MedicationResponse,
    doctors: Dict[str, DoctorResponse],
) -> MedicationEntry:
    summary = f"{medication.dosage}, {medication.frequency}"
    if medication.purpose:
        summary += f" - {medication.purpose}"

    return MedicationEntry(
        id=medication.id,
        date=medication.start_date,
        title=f"Medication: {medication.name}",
        summary=summary,
        relations=TimelineRelations(
            medication_id=medication.id,
            doctor_id=medication.prescribing_doctor_id,
        ),
        data=MedicationData.model_validate({
            **medication.model_dump(),
            "doctor_name": _doctor_name(medication.prescribing_doctor_id, doctors),
        }),
    )


def project_status(entry: StatusResponse) -> StatusTimelineEntry:
    summary = ", ".join(entry.symptoms)
    if not summary:
        summary = (entry.content or entry.notes or "")[:SUMMARY_FALLBACK_LENGTH]

    return StatusTimelineEntry(
        id=entry.id,
        date=entry.date,
        time=entry.time,
        title=f"Status: Pain {entry.pain_level}/10",
        summary=summary,
        severity=pain_severity(entry.pain_level),
        relations=TimelineRelations(document_ids=list(entry.document_ids)),
        data=entry.model_copy(deep=True),
    )


def project_document(
    document: DocumentResponse,
    doctors: Dict[str, DoctorResponse],
) -> DocumentEntry:
    return DocumentEntry(
        id=document.id,
        date=document.date,
        title=f"Document: {document.title}",
        summary=document.description or document.type,
        relations=TimelineRelations(
            doctor_id=document.doctor_id,
            appointment_id=document.appointment_id,
            document_ids=[document.id],
        ),
        data=DocumentData.model_validate({
            **document.model_dump(),
            "doctor_name": _doctor_name(document.doctor_id, doctors),
        }),
    )


# ============== Filtering ==============

def matches_filters(entry: TimelineEntry, filters: TimelineFilter) -> bool:
    """Return True if the entry passes every criterion set on `filters`."""
    if filters.start_date is not None and entry.date < filters.start_date:
        return False
    if filters.end_date is not None and entry.date > filters.end_date:
        return False
    if filters.kinds and entry.kind not in filters.kinds:
        return False

    if filters.doctor_id is not None and entry.HAS_DOCTOR_RELATION:
        doctor_id = entry.relations.doctor_id
        if doctor_id is not None and doctor_id != filters.doctor_id:
            return False

    if entry.HAS_PAIN_LEVEL:
        pain_level = entry.pain_level
        if filters.min_pain_level is not None and pain_level < filters.min_pain_level:
            return False
        if filters.max_pain_level is not None and pain_level > filters.max_pain_level:
            return False

    return True


# ============== Ordering ==============

def parse_time_of_day(value: Optional[str]) -> Optional[int]:
    """
    Parse "HH:MM" or "HH:MM:SS" into seconds since midnight.

    Returns None for anything else (wrong field count, non-numeric parts),
    so callers can fall back to date-only ordering.
    """
    if not value:
        return None

    match = _TIME_OF_DAY.fullmatch(value.strip())
    if not match:
        return None

    hours, minutes, seconds = match.groups(default="0")
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds)


def sort_timestamp(entry: TimelineEntry) -> int:
    """Milliseconds since the epoch: entry date at midnight UTC plus its time of day."""
    midnight = datetime.combine(entry.date, time.min, tzinfo=timezone.utc)
    timestamp = int(midnight.timestamp()) * 1000

    seconds = parse_time_of_day(entry.time)
    if seconds is not None:
        timestamp += seconds * 1000
    return timestamp


# ============== Pipeline ==============

def build_timeline(
    doctors: Iterable[DoctorResponse],
    appointments: Iterable[AppointmentResponse],
    medications: Iterable[MedicationResponse],
    statuses: Iterable[StatusResponse],
    documents: Iterable[DocumentResponse],
    filters: Optional[TimelineFilter] = None,
) -> List[TimelineEntry]:
    """
    Build the merged timeline.

    Args:
        doctors: All known doctors, used to resolve names
        appointments: Appointment records
        medications: Medication records
        statuses: Status entry records
        documents: Document records
        filters: Optional criteria; None keeps everything

    Returns:
        Entries sorted newest first. Entries with equal timestamps keep
        their merge order (appointments, medications, statuses, documents).
    """
    doctor_map = {doctor.id: doctor for doctor in doctors}

    entries: List[TimelineEntry] = []
    entries.extend(project_appointment(a, doctor_map) for a in appointments)
    entries.extend(project_medication(m, doctor_map) for m in medications)
    entries.extend(project_status(s) for s in statuses)
    entries.extend(project_document(d, doctor_map) for d in documents)

    if filters is not None:
        entries = [e for e in entries if matches_filters(e, filters)]

    entries.sort(key=sort_timestamp, reverse=True)
    return entries
