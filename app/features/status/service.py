# Status Feature - Service

from typing import List
from bson import ObjectId
from bson.errors import InvalidId
from app.features.status.models import StatusEntry
from app.features.status.schemas import StatusCreate, StatusUpdate, StatusResponse
from app.core.logging import logger
from app.shared.exceptions import NotFoundException


class StatusService:
    """Service class for status entry operations."""
    
    @staticmethod
    def status_to_response(entry: StatusEntry) -> StatusResponse:
        """Convert StatusEntry document to response schema."""
        return StatusResponse(
            id=str(entry.id),
            date=entry.date,
            time=entry.time,
            pain_level=entry.pain_level,
            symptoms=entry.symptoms,
            affected_areas=entry.affected_areas,
            general_condition=entry.general_condition,
            sleep=entry.sleep,
            appetite=entry.appetite,
            mood=entry.mood,
            notes=entry.notes,
            content=entry.content,
            medications_taken=entry.medications_taken,
            document_ids=entry.document_ids,
            created_at=entry.created_at,
            updated_at=entry.updated_at,
        )
    
    @staticmethod
    async def list_statuses() -> List[StatusResponse]:
        """Get all status entries, newest first."""
        entries = await StatusEntry.find_all().sort(-StatusEntry.date).to_list()
        return [StatusService.status_to_response(e) for e in entries]
    
    @staticmethod
    async def get_status(status_id: str) -> StatusEntry:
        """Get a status entry by ID, or raise NotFoundException."""
        try:
            entry = await StatusEntry.get(ObjectId(status_id))
        except InvalidId:
            raise NotFoundException("Status entry not found")
        
        if not entry:
            raise NotFoundException("Status entry not found")
        
        return entry
    
    @staticmethod
    async def create_status(status_data: StatusCreate) -> StatusResponse:
        """Create a new status entry."""
        entry = StatusEntry(**status_data.model_dump())
        await entry.insert()
        
        logger.info(f"Created status entry {entry.id} for {entry.date} (pain {entry.pain_level}/10)")
        
        return StatusService.status_to_response(entry)
    
    @staticmethod
    async def update_status(status_id: str, update_data: StatusUpdate) -> StatusResponse:
        """Apply a partial update to a status entry."""
        entry = await StatusService.get_status(status_id)
        
        for field, value in update_data.model_dump(exclude_unset=True).items():
            setattr(entry, field, value)
        entry.update_timestamp()
        await entry.save()
        
        logger.info(f"Updated status entry {status_id}")
        
        return StatusService.status_to_response(entry)
    
    @staticmethod
    async def delete_status(status_id: str) -> bool:
        """Delete a status entry."""
        entry = await StatusService.get_status(status_id)
        await entry.delete()
        
        logger.info(f"Deleted status entry {status_id}")
        
        return True
