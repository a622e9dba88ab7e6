"""FastAPI routers."""

from app.routers.health import router as health_router
from app.features.doctors.router import router as doctors_router
from app.features.appointments.router import router as appointments_router
from app.features.medications.router import router as medications_router
from app.features.status.router import router as status_router
from app.features.documents.router import router as documents_router
from app.features.timeline.router import router as timeline_router

__all__ = [
    "health_router",
    "doctors_router",
    "appointments_router",
    "medications_router",
    "status_router",
    "documents_router",
    "timeline_router",
]
