# Medications Feature - Service

from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from app.features.medications.models import Medication
from app.features.medications.schemas import MedicationCreate, MedicationUpdate, MedicationResponse
from app.core.logging import logger
from app.shared.exceptions import NotFoundException


class MedicationService:
    """Service class for medication operations."""
    
    @staticmethod
    def medication_to_response(medication: Medication) -> MedicationResponse:
        """Convert Medication document to response schema."""
        return MedicationResponse(
            id=str(medication.id),
            name=medication.name,
            generic_name=medication.generic_name,
            dosage=medication.dosage,
            frequency=medication.frequency,
            route=medication.route,
            prescribing_doctor_id=medication.prescribing_doctor_id,
            appointment_id=medication.appointment_id,
            start_date=medication.start_date,
            end_date=medication.end_date,
            is_active=medication.is_active,
            purpose=medication.purpose,
            effects=medication.effects,
            side_effects=medication.side_effects,
            notes=medication.notes,
            created_at=medication.created_at,
            updated_at=medication.updated_at,
        )
    
    @staticmethod
    async def list_medications() -> List[MedicationResponse]:
        """Get all medications, most recently started first."""
        medications = await Medication.find_all().sort(-Medication.start_date).to_list()
        return [MedicationService.medication_to_response(m) for m in medications]
    
    @staticmethod
    async def get_medication(medication_id: str) -> Medication:
        """Get a medication by ID, or raise NotFoundException."""
        try:
            medication = await Medication.get(ObjectId(medication_id))
        except InvalidId:
            raise NotFoundException("Medication not found")
        
        if not medication:
            raise NotFoundException("Medication not found")
        
        return medication
    
    @staticmethod
    async def create_medication(medication_data: MedicationCreate) -> MedicationResponse:
        """Create a new medication."""
        medication = Medication(**medication_data.model_dump())
        await medication.insert()
        
        logger.info(f"Created medication {medication.id} ({medication.name} {medication.dosage})")
        
        return MedicationService.medication_to_response(medication)
    
    @staticmethod
    async def update_medication(medication_id: str, update_data: MedicationUpdate) -> MedicationResponse:
        """Apply a partial update to a medication."""
        medication = await MedicationService.get_medication(medication_id)
        
        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(medication, field, value)
        medication.update_timestamp()
        await medication.save()
        
        logger.info(f"Updated medication {medication_id}")
        
        return MedicationService.medication_to_response(medication)
    
    @staticmethod
    async def delete_medication(medication_id: str) -> bool:
        """Delete a medication."""
        medication = await MedicationService.get_medication(medication_id)
        await medication.delete()
        
        logger.info(f"Deleted medication {medication_id}")
        
        return True
