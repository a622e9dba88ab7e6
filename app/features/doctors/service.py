# Doctors Feature - Service

from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from app.features.doctors.models import Doctor
from app.features.doctors.schemas import DoctorCreate, DoctorUpdate, DoctorResponse
from app.core.logging import logger
from app.shared.exceptions import NotFoundException


class DoctorService:
    """Service class for doctor operations."""
    
    @staticmethod
    def doctor_to_response(doctor: Doctor) -> DoctorResponse:
        """Convert Doctor document to response schema."""
        return DoctorResponse(
            id=str(doctor.id),
            name=doctor.name,
            specialty=doctor.specialty,
            clinic=doctor.clinic,
            address=doctor.address,
            phone=doctor.phone,
            email=doctor.email,
            notes=doctor.notes,
            first_visit=doctor.first_visit,
            is_active=doctor.is_active,
            created_at=doctor.created_at,
            updated_at=doctor.updated_at,
        )
    
    @staticmethod
    async def list_doctors() -> List[DoctorResponse]:
        """Get all doctors, sorted by name."""
        doctors = await Doctor.find_all().sort(+Doctor.name).to_list()
        return [DoctorService.doctor_to_response(d) for d in doctors]
    
    @staticmethod
    async def get_doctor(doctor_id: str) -> Doctor:
        """
        Get a doctor by ID.
        
        Raises:
            NotFoundException: If the id is malformed or unknown
        """
        try:
            doctor = await Doctor.get(ObjectId(doctor_id))
        except InvalidId:
            raise NotFoundException("Doctor not found")
        
        if not doctor:
            raise NotFoundException("Doctor not found")
        
        return doctor
    
    @staticmethod
    async def create_doctor(doctor_data: DoctorCreate) -> DoctorResponse:
        """Create a new doctor."""
        doctor = Doctor(**doctor_data.model_dump())
        await doctor.insert()
        
        logger.info(f"Created doctor {doctor.id} ({doctor.name})")
        
        return DoctorService.doctor_to_response(doctor)
    
    @staticmethod
    async def update_doctor(doctor_id: str, update_data: DoctorUpdate) -> DoctorResponse:
        """Apply a partial update to a doctor."""
        doctor = await DoctorService.get_doctor(doctor_id)
        
        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(doctor, field, value)
        doctor.update_timestamp()
        await doctor.save()
        
        logger.info(f"Updated doctor {doctor_id}")
        
        return DoctorService.doctor_to_response(doctor)
    
    @staticmethod
    async def delete_doctor(doctor_id: str) -> bool:
        """Delete a doctor."""
        doctor = await DoctorService.get_doctor(doctor_id)
        await doctor.delete()
        
        logger.info(f"Deleted doctor {doctor_id}")
        
        return True
