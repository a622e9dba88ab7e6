"""Tests for the HTTP layer. Record reads are monkeypatched, no database needed."""

import sys
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from main import app
from app.features.doctors.schemas import DoctorResponse
from app.features.doctors.service import DoctorService
from app.features.appointments.schemas import AppointmentResponse
from app.features.appointments.service import AppointmentService
from app.features.medications.schemas import MedicationResponse
from app.features.medications.service import MedicationService
from app.features.status.schemas import StatusResponse
from app.features.status.service import StatusService
from app.features.documents.schemas import DocumentResponse
from app.features.documents.service import DocumentService


# Lifespan (database connection) only runs when the client is used as a context manager
client = TestClient(app)

TIMELINE_URL = "/api/v1/timeline"


def _returning(records):
    async def fake():
        return records
    return fake


@pytest.fixture
def records(monkeypatch):
    doctors = [DoctorResponse(id="d1", name="Dr. Weber", specialty="Orthopedics")]
    appointments = [
        AppointmentResponse(
            id="a1",
            date=date(2024, 3, 1),
            time="09:30",
            doctor_id="d1",
            type="consultation",
            reason="Back pain",
            findings="Muscle tension",
        )
    ]
    medications = [
        MedicationResponse(
            id="m1",
            name="Ibuprofen",
            dosage="400mg",
            frequency="3x daily",
            start_date=date(2024, 2, 20),
            prescribing_doctor_id="d2",
        )
    ]
    statuses = [
        StatusResponse(id="s1", date=date(2024, 3, 2), time="14:00", pain_level=8, symptoms=["stiffness"]),
        StatusResponse(id="s2", date=date(2024, 3, 2), time="09:30", pain_level=3),
    ]
    documents = [
        DocumentResponse(
            id="doc1",
            type="lab",
            title="Blood panel",
            file_path="uploads/blood.pdf",
            file_type="pdf",
            date=date(2024, 2, 25),
        )
    ]

    monkeypatch.setattr(DoctorService, "list_doctors", _returning(doctors))
    monkeypatch.setattr(AppointmentService, "list_appointments", _returning(appointments))
    monkeypatch.setattr(MedicationService, "list_medications", _returning(medications))
    monkeypatch.setattr(StatusService, "list_statuses", _returning(statuses))
    monkeypatch.setattr(DocumentService, "list_documents", _returning(documents))


def ids(response):
    return [(e["kind"], e["id"]) for e in response.json()]


def test_timeline_returns_sorted_json_array(records):
    response = client.get(TIMELINE_URL)

    assert response.status_code == 200
    assert ids(response) == [
        ("status", "s1"),
        ("status", "s2"),
        ("appointment", "a1"),
        ("document", "doc1"),
        ("medication", "m1"),
    ]


def test_timeline_entry_shape(records):
    entries = {e["id"]: e for e in client.get(TIMELINE_URL).json()}

    appointment = entries["a1"]
    assert appointment["title"] == "Appointment: Dr. Weber"
    assert appointment["summary"] == "Back pain - Muscle tension"
    assert appointment["date"] == "2024-03-01"
    assert appointment["severity"] is None
    assert appointment["relations"]["appointment_id"] == "a1"
    assert appointment["data"]["doctor_name"] == "Dr. Weber"

    status = entries["s1"]
    assert status["severity"] == "high"
    assert status["data"]["pain_level"] == 8
    assert "doctor_name" not in status["data"]

    medication = entries["m1"]
    assert medication["data"]["doctor_name"] is None


def test_kinds_query_parameter(records):
    response = client.get(TIMELINE_URL, params={"kinds": "appointment, document"})

    assert ids(response) == [("appointment", "a1"), ("document", "doc1")]


def test_blank_kinds_means_all(records):
    response = client.get(TIMELINE_URL, params={"kinds": " , "})

    assert len(response.json()) == 5


def test_doctor_and_date_query_parameters(records):
    response = client.get(
        TIMELINE_URL,
        params={"doctor_id": "d1", "start_date": "2024-02-21", "end_date": "2024-03-01"},
    )

    assert ids(response) == [("appointment", "a1"), ("document", "doc1")]


def test_pain_query_parameters(records):
    response = client.get(TIMELINE_URL, params={"min_pain_level": 5, "max_pain_level": 9})

    kinds_and_ids = ids(response)
    assert ("status", "s1") in kinds_and_ids
    assert ("status", "s2") not in kinds_and_ids
    assert len(kinds_and_ids) == 4


@pytest.mark.parametrize(
    "params",
    [
        {"min_pain_level": 11},
        {"max_pain_level": -1},
        {"start_date": "not-a-date"},
        {"minPainLevel": 11},
    ],
)
def test_invalid_query_parameters_rejected(records, params):
    assert client.get(TIMELINE_URL, params=params).status_code == 422


def test_inverted_ranges_are_bad_requests(records):
    dates = client.get(TIMELINE_URL, params={"start_date": "2024-03-02", "end_date": "2024-03-01"})
    pain = client.get(TIMELINE_URL, params={"min_pain_level": 7, "max_pain_level": 2})

    assert dates.status_code == 400
    assert dates.json()["detail"] == "start_date must not be after end_date"
    assert pain.status_code == 400


def test_single_day_range_is_allowed(records):
    response = client.get(TIMELINE_URL, params={"start_date": "2024-03-02", "end_date": "2024-03-02"})

    assert ids(response) == [("status", "s1"), ("status", "s2")]


def test_camel_case_query_parameters(records):
    response = client.get(
        TIMELINE_URL,
        params={"types": "status", "minPainLevel": 5, "startDate": "2024-03-01", "doctorId": "d1"},
    )

    assert ids(response) == [("status", "s1")]


def test_snake_case_wins_over_camel_case(records):
    response = client.get(TIMELINE_URL, params={"kinds": "document", "types": "status"})

    assert ids(response) == [("document", "doc1")]


def test_database_failure_returns_503(records, monkeypatch):
    async def unavailable():
        raise ServerSelectionTimeoutError("no servers found")

    monkeypatch.setattr(StatusService, "list_statuses", unavailable)

    response = client.get(TIMELINE_URL)

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to fetch timeline"


def test_malformed_stored_record_returns_503(records, monkeypatch):
    async def malformed():
        return [StatusResponse.model_validate({"id": "s3", "date": "2024-03-02", "pain_level": None})]

    monkeypatch.setattr(StatusService, "list_statuses", malformed)

    response = client.get(TIMELINE_URL)

    assert response.status_code == 503


# ============== Record endpoints ==============

@pytest.mark.parametrize(
    "path",
    [
        "/api/v1/doctors/not-an-id",
        "/api/v1/appointments/not-an-id",
        "/api/v1/medications/not-an-id",
        "/api/v1/status/not-an-id",
        "/api/v1/documents/not-an-id",
    ],
)
def test_malformed_id_is_not_found(path):
    response = client.get(path)

    assert response.status_code == 404


def test_status_create_rejects_out_of_range_pain():
    response = client.post("/api/v1/status", json={"date": "2024-03-02", "pain_level": 11})

    assert response.status_code == 422


def test_appointment_create_rejects_malformed_time():
    response = client.post(
        "/api/v1/appointments",
        json={
            "date": "2024-03-01",
            "time": "half past nine",
            "doctor_id": "d1",
            "type": "consultation",
            "reason": "Back pain",
        },
    )

    assert response.status_code == 422


def test_list_endpoint_uses_service(monkeypatch):
    doctors = [DoctorResponse(id="d1", name="Dr. Weber", specialty="Orthopedics")]
    monkeypatch.setattr(DoctorService, "list_doctors", _returning(doctors))

    response = client.get("/api/v1/doctors")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "Dr. Weber"


def test_health_endpoints():
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/ready").json() == {"status": "ready"}
    assert client.get("/").json()["docs"] == "/docs"
