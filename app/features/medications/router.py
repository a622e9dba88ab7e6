# Medications Feature - Router

from typing import List
from fastapi import APIRouter, status
from app.features.medications.schemas import MedicationCreate, MedicationUpdate, MedicationResponse
from app.features.medications.service import MedicationService
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/medications", tags=["Medications"])


@router.get("", response_model=List[MedicationResponse])
async def list_medications():
    """List all medications, most recently started first."""
    return await MedicationService.list_medications()


@router.post("", response_model=MedicationResponse, status_code=status.HTTP_201_CREATED)
async def create_medication(medication_data: MedicationCreate):
    """
    Record a medication.
    
    - **name**: Product name
    - **dosage** / **frequency**: How much and how often
    - **start_date**: First day taken
    - **prescribing_doctor_id**: Optional prescribing doctor
    """
    return await MedicationService.create_medication(medication_data)


@router.get("/{medication_id}", response_model=MedicationResponse)
async def get_medication(medication_id: str):
    """Get a single medication."""
    medication = await MedicationService.get_medication(medication_id)
    return MedicationService.medication_to_response(medication)


@router.put("/{medication_id}", response_model=MedicationResponse)
async def update_medication(medication_id: str, update_data: MedicationUpdate):
    """Update a medication. Fields left out of the body keep their values."""
    return await MedicationService.update_medication(medication_id, update_data)


@router.delete("/{medication_id}", response_model=MessageResponse)
async def delete_medication(medication_id: str):
    """Delete a medication."""
    await MedicationService.delete_medication(medication_id)
    return MessageResponse(message="Medication deleted successfully")
