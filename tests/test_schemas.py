"""Test record schemas, filter validation and settings helpers."""

import sys
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.config import Settings
from app.features.appointments.schemas import AppointmentCreate, AppointmentResponse
from app.features.doctors.schemas import Address, DoctorResponse
from app.features.medications.schemas import MedicationResponse
from app.features.status.schemas import StatusCreate, StatusUpdate
from app.features.timeline.dependencies import parse_kinds
from app.features.timeline.schemas import TimelineFilter


def test_single_string_recommendation_becomes_list():
    appointment = AppointmentResponse(
        id="a1",
        date=date(2024, 3, 1),
        doctor_id="d1",
        type="consultation",
        reason="Back pain",
        recommendations="Rest for a week",
    )

    assert appointment.recommendations == ["Rest for a week"]


def test_blank_string_side_effects_become_empty_list():
    medication = MedicationResponse(
        id="m1",
        name="Ibuprofen",
        dosage="400mg",
        frequency="3x daily",
        start_date=date(2024, 2, 20),
        side_effects="  ",
    )

    assert medication.side_effects == []
    assert medication.route == "oral"


def test_doctor_address_accepts_text_or_structure():
    structured = DoctorResponse(id="d1", name="Dr. Weber", specialty="GP", address={"city": "Freiburg"})
    text = DoctorResponse(id="d2", name="Dr. Klein", specialty="GP", address="Hauptstr. 1, Freiburg")

    assert isinstance(structured.address, Address)
    assert structured.address.city == "Freiburg"
    assert text.address == "Hauptstr. 1, Freiburg"
    assert text.is_active is True


@pytest.mark.parametrize("value", ["09:30", "23:59:59"])
def test_create_accepts_well_formed_times(value):
    status = StatusCreate(date=date(2024, 3, 2), time=value, pain_level=2)

    assert status.time == value


@pytest.mark.parametrize("value", ["9.30", "abc", "09:30:00:00"])
def test_create_rejects_malformed_times(value):
    with pytest.raises(ValidationError):
        AppointmentCreate(
            date=date(2024, 3, 1),
            time=value,
            doctor_id="d1",
            type="consultation",
            reason="Back pain",
        )


def test_partial_update_only_reports_supplied_fields():
    update = StatusUpdate(pain_level=4)

    assert update.model_dump(exclude_unset=True) == {"pain_level": 4}


@pytest.mark.parametrize("field", ["min_pain_level", "max_pain_level"])
@pytest.mark.parametrize("value", [-1, 11])
def test_filter_rejects_pain_levels_outside_range(field, value):
    with pytest.raises(ValidationError):
        TimelineFilter(**{field: value})


def test_filter_defaults_to_no_criteria():
    assert TimelineFilter().model_dump(exclude_none=True) == {}


def test_parse_kinds():
    assert parse_kinds("appointment,status") == frozenset({"appointment", "status"})
    assert parse_kinds(" document , ") == frozenset({"document"})
    assert parse_kinds(",") is None
    assert parse_kinds("") is None
    assert parse_kinds(None) is None


def test_cors_origins_falls_back_on_bad_json():
    assert Settings(BACKEND_CORS_ORIGINS="not json").cors_origins == ["http://localhost:3000"]
    assert Settings(BACKEND_CORS_ORIGINS='["https://records.example"]').cors_origins == ["https://records.example"]
