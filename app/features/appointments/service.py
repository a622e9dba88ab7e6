# Appointments Feature - Service

from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from app.features.appointments.models import Appointment
from app.features.appointments.schemas import AppointmentCreate, AppointmentUpdate, AppointmentResponse
from app.core.logging import logger
from app.shared.exceptions import NotFoundException


class AppointmentService:
    """Service class for appointment operations."""
    
    @staticmethod
    def appointment_to_response(appointment: Appointment) -> AppointmentResponse:
        """Convert Appointment document to response schema."""
        return AppointmentResponse(
            id=str(appointment.id),
            date=appointment.date,
            time=appointment.time,
            doctor_id=appointment.doctor_id,
            type=appointment.type,
            reason=appointment.reason,
            findings=appointment.findings,
            diagnosis=appointment.diagnosis,
            recommendations=appointment.recommendations,
            prescriptions=appointment.prescriptions,
            document_ids=appointment.document_ids,
            notes=appointment.notes,
            follow_up_date=appointment.follow_up_date,
            created_at=appointment.created_at,
            updated_at=appointment.updated_at,
        )
    
    @staticmethod
    async def list_appointments() -> List[AppointmentResponse]:
        """Get all appointments, newest first."""
        appointments = await Appointment.find_all().sort(-Appointment.date).to_list()
        return [AppointmentService.appointment_to_response(a) for a in appointments]
    
    @staticmethod
    async def get_appointment(appointment_id: str) -> Appointment:
        """
        Get an appointment by ID.
        
        Raises:
            NotFoundException: If the id is malformed or unknown
        """
        try:
            appointment = await Appointment.get(ObjectId(appointment_id))
        except InvalidId:
            raise NotFoundException("Appointment not found")
        
        if not appointment:
            raise NotFoundException("Appointment not found")
        
        return appointment
    
    @staticmethod
    async def create_appointment(appointment_data: AppointmentCreate) -> AppointmentResponse:
        """Create a new appointment."""
        appointment = Appointment(**appointment_data.model_dump())
        await appointment.insert()
        
        logger.info(f"Created appointment {appointment.id} on {appointment.date} with doctor {appointment.doctor_id}")
        
        return AppointmentService.appointment_to_response(appointment)
    
    @staticmethod
    async def update_appointment(appointment_id: str, update_data: AppointmentUpdate) -> AppointmentResponse:
        """Apply a partial update to an appointment."""
        appointment = await AppointmentService.get_appointment(appointment_id)
        
        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(appointment, field, value)
        appointment.update_timestamp()
        await appointment.save()
        
        logger.info(f"Updated appointment {appointment_id}")
        
        return AppointmentService.appointment_to_response(appointment)
    
    @staticmethod
    async def delete_appointment(appointment_id: str) -> bool:
        """Delete an appointment."""
        appointment = await AppointmentService.get_appointment(appointment_id)
        await appointment.delete()
        
        logger.info(f"Deleted appointment {appointment_id}")
        
        return True
