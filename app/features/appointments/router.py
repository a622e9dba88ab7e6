# Appointments Feature - Router

from typing import List
from fastapi import APIRouter, status
from app.features.appointments.schemas import AppointmentCreate, AppointmentUpdate, AppointmentResponse
from app.features.appointments.service import AppointmentService
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.get("", response_model=List[AppointmentResponse])
async def list_appointments():
    """List all appointments, most recent first."""
    return await AppointmentService.list_appointments()


@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(appointment_data: AppointmentCreate):
    """
    Record an appointment.
    
    - **date**: Day of the appointment
    - **time**: Optional start time (HH:MM)
    - **doctor_id**: Doctor seen
    - **type**: Category tag (consultation, treatment, followup, ...)
    - **reason**: Why the appointment took place
    """
    return await AppointmentService.create_appointment(appointment_data)


@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(appointment_id: str):
    """Get a single appointment."""
    appointment = await AppointmentService.get_appointment(appointment_id)
    return AppointmentService.appointment_to_response(appointment)


@router.put("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(appointment_id: str, update_data: AppointmentUpdate):
    """Update an appointment. Fields left out of the body keep their values."""
    return await AppointmentService.update_appointment(appointment_id, update_data)


@router.delete("/{appointment_id}", response_model=MessageResponse)
async def delete_appointment(appointment_id: str):
    """Delete an appointment."""
    await AppointmentService.delete_appointment(appointment_id)
    return MessageResponse(message="Appointment deleted successfully")
