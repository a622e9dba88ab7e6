# Status Feature - Router

from typing import List
from fastapi import APIRouter, status
from app.features.status.schemas import StatusCreate, StatusUpdate, StatusResponse
from app.features.status.service import StatusService
from app.shared.schemas import MessageResponse


router = APIRouter(prefix="/status", tags=["Status"])


@router.get("", response_model=List[StatusResponse])
async def list_statuses():
    """List all status entries, most recent first."""
    return await StatusService.list_statuses()


@router.post("", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
async def create_status(status_data: StatusCreate):
    """
    Record how the day went.
    
    - **date** / **time**: When the entry applies
    - **pain_level**: 0-10
    - **symptoms**: Symptom tags
    """
    return await StatusService.create_status(status_data)


@router.get("/{status_id}", response_model=StatusResponse)
async def get_status(status_id: str):
    """Get a single status entry."""
    entry = await StatusService.get_status(status_id)
    return StatusService.status_to_response(entry)


@router.put("/{status_id}", response_model=StatusResponse)
async def update_status(status_id: str, update_data: StatusUpdate):
    """Update a status entry. Fields left out of the body keep their values."""
    return await StatusService.update_status(status_id, update_data)


@router.delete("/{status_id}", response_model=MessageResponse)
async def delete_status(status_id: str):
    """Delete a status entry."""
    await StatusService.delete_status(status_id)
    return MessageResponse(message="Status entry deleted successfully")
