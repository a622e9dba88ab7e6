"""Test record service updates and deletes against an in-memory stand-in document."""

import asyncio
import sys
from datetime import date, datetime, timezone
from pathlib import Path

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import app
from app.features.appointments.schemas import AppointmentUpdate
from app.features.appointments.service import AppointmentService
from app.features.doctors.schemas import DoctorUpdate
from app.features.doctors.service import DoctorService
from app.features.documents.schemas import DocumentUpdate
from app.features.documents.service import DocumentService
from app.features.medications.schemas import MedicationUpdate
from app.features.medications.service import MedicationService
from app.features.status.schemas import StatusUpdate
from app.features.status.service import StatusService
from app.shared.models import TimestampMixin


client = TestClient(app)

CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


class StoredRecord:
    """Stands in for a loaded Beanie document and records what was persisted."""

    def __init__(self, **fields):
        self.id = ObjectId()
        self.created_at = CREATED
        self.updated_at = CREATED
        self.calls = []
        for name, value in fields.items():
            setattr(self, name, value)

    def update_timestamp(self):
        self.updated_at = datetime.now(timezone.utc)

    async def save(self):
        self.calls.append("save")

    async def delete(self):
        self.calls.append("delete")


def stored_status(**overrides):
    fields = dict(
        date=date(2024, 3, 2),
        time="08:15",
        pain_level=6,
        symptoms=["stiffness"],
        affected_areas=[],
        general_condition=None,
        sleep=None,
        appetite=None,
        mood="okay",
        notes="Walked in the evening",
        content=None,
        medications_taken=[],
        document_ids=[],
    )
    fields.update(overrides)
    return StoredRecord(**fields)


def stored_doctor(**overrides):
    fields = dict(
        name="Dr. Weber",
        specialty="Orthopedics",
        clinic=None,
        address=None,
        phone=None,
        email=None,
        notes=None,
        first_visit=None,
        is_active=True,
    )
    fields.update(overrides)
    return StoredRecord(**fields)


def _loading(record):
    async def fake(record_id):
        return record
    return fake


# ============== Updates ==============

def test_status_update_changes_only_supplied_fields(monkeypatch):
    entry = stored_status()
    monkeypatch.setattr(StatusService, "get_status", _loading(entry))

    response = asyncio.run(
        StatusService.update_status(str(entry.id), StatusUpdate(pain_level=3, symptoms="headache"))
    )

    assert entry.calls == ["save"]
    assert response.pain_level == 3
    assert response.symptoms == ["headache"]
    assert response.mood == "okay"
    assert response.date == date(2024, 3, 2)
    assert response.created_at == CREATED
    assert response.updated_at > CREATED


def test_status_update_can_clear_optional_field(monkeypatch):
    entry = stored_status()
    monkeypatch.setattr(StatusService, "get_status", _loading(entry))

    response = asyncio.run(
        StatusService.update_status(str(entry.id), StatusUpdate.model_validate({"notes": None}))
    )

    assert response.notes is None
    assert response.pain_level == 6


def test_doctor_update_keeps_identity(monkeypatch):
    doctor = stored_doctor()
    monkeypatch.setattr(DoctorService, "get_doctor", _loading(doctor))

    response = asyncio.run(
        DoctorService.update_doctor(str(doctor.id), DoctorUpdate(is_active=False, phone="0761 123"))
    )

    assert doctor.calls == ["save"]
    assert response.id == str(doctor.id)
    assert response.name == "Dr. Weber"
    assert response.is_active is False
    assert response.phone == "0761 123"


@pytest.mark.parametrize(
    "schema",
    [DoctorUpdate, AppointmentUpdate, MedicationUpdate, StatusUpdate, DocumentUpdate],
)
def test_update_rejects_null_for_required_fields(schema):
    for field in schema.REQUIRED_FIELDS:
        with pytest.raises(ValidationError):
            schema.model_validate({field: None})


def test_put_with_null_pain_level_is_rejected_before_saving(monkeypatch):
    entry = stored_status()
    monkeypatch.setattr(StatusService, "get_status", _loading(entry))

    response = client.put(f"/api/v1/status/{entry.id}", json={"pain_level": None})

    assert response.status_code == 422
    assert entry.calls == []
    assert entry.pain_level == 6


def test_put_updates_status_through_router(monkeypatch):
    entry = stored_status()
    monkeypatch.setattr(StatusService, "get_status", _loading(entry))

    response = client.put(f"/api/v1/status/{entry.id}", json={"mood": "good", "time": "21:00"})

    assert response.status_code == 200
    assert response.json()["mood"] == "good"
    assert response.json()["time"] == "21:00"
    assert entry.calls == ["save"]


# ============== Deletes ==============

@pytest.mark.parametrize(
    "service, loader, path, message",
    [
        (DoctorService, "get_doctor", "doctors", "Doctor deleted successfully"),
        (AppointmentService, "get_appointment", "appointments", "Appointment deleted successfully"),
        (MedicationService, "get_medication", "medications", "Medication deleted successfully"),
        (StatusService, "get_status", "status", "Status entry deleted successfully"),
        (DocumentService, "get_document", "documents", "Document deleted successfully"),
    ],
)
def test_delete_removes_record(monkeypatch, service, loader, path, message):
    record = StoredRecord()
    monkeypatch.setattr(service, loader, _loading(record))

    response = client.delete(f"/api/v1/{path}/{record.id}")

    assert response.status_code == 200
    assert response.json()["message"] == message
    assert record.calls == ["delete"]


def test_delete_service_returns_true(monkeypatch):
    entry = stored_status()
    monkeypatch.setattr(StatusService, "get_status", _loading(entry))

    assert asyncio.run(StatusService.delete_status(str(entry.id))) is True
    assert entry.calls == ["delete"]


# ============== Timestamps ==============

class Stamped(TimestampMixin):
    pass


def test_update_timestamp_is_timezone_aware():
    stamped = Stamped()
    stamped.update_timestamp()

    assert stamped.updated_at.tzinfo is not None
    assert stamped.updated_at.utcoffset().total_seconds() == 0
