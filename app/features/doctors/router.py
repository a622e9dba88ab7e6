# Doctors Feature - Router

from typing import List
from fastapi import APIRouter, status
from app.features.doctors.schemas import DoctorCreate, DoctorUpdate, DoctorResponse
from app.features.doctors.service import DoctorService
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.get("", response_model=List[DoctorResponse])
async def list_doctors():
    """List all doctors, sorted by name."""
    return await DoctorService.list_doctors()


@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def create_doctor(doctor_data: DoctorCreate):
    """
    Create a new doctor.
    
    - **name**: Doctor's display name
    - **specialty**: Medical specialty
    """
    return await DoctorService.create_doctor(doctor_data)


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(doctor_id: str):
    """Get a single doctor."""
    doctor = await DoctorService.get_doctor(doctor_id)
    return DoctorService.doctor_to_response(doctor)


@router.put("/{doctor_id}", response_model=DoctorResponse)
async def update_doctor(doctor_id: str, update_data: DoctorUpdate):
    """Update a doctor. Fields left out of the body keep their values."""
    return await DoctorService.update_doctor(doctor_id, update_data)


@router.delete("/{doctor_id}", response_model=MessageResponse)
async def delete_doctor(doctor_id: str):
    """Delete a doctor."""
    await DoctorService.delete_doctor(doctor_id)
    return MessageResponse(message="Doctor deleted successfully")
