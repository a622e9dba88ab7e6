# Timeline Feature - Service

import asyncio
from typing import List, Optional
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from app.features.doctors.service import DoctorService
from app.features.appointments.service import AppointmentService
from app.features.medications.service import MedicationService
from app.features.status.service import StatusService
from app.features.documents.service import DocumentService
from app.features.timeline.aggregator import build_timeline
from app.features.timeline.schemas import TimelineEntry, TimelineFilter
from app.core.logging import logger
from app.shared.exceptions import ServiceUnavailableException


class TimelineService:
    """Loads every record collection and builds the merged timeline."""
    
    @staticmethod
    async def get_timeline(filters: Optional[TimelineFilter] = None) -> List[TimelineEntry]:
        """
        Build the timeline from the current records.
        
        The five collections are read concurrently; the merge itself runs
        once all of them are loaded.
        
        Args:
            filters: Optional timeline criteria
            
        Returns:
            Timeline entries, newest first
            
        Raises:
            ServiceUnavailableException: If the database could not be read or
                holds a malformed record
        """
        try:
            doctors, appointments, medications, statuses, documents = await asyncio.gather(
                DoctorService.list_doctors(),
                AppointmentService.list_appointments(),
                MedicationService.list_medications(),
                StatusService.list_statuses(),
                DocumentService.list_documents(),
            )
        except PyMongoError as e:
            logger.error(f"Failed to load records for timeline: {type(e).__name__}: {e}")
            raise ServiceUnavailableException("Failed to fetch timeline")
        except ValidationError as e:
            # A stored record no longer matches its schema
            logger.error(f"Malformed record while loading timeline: {e}")
            raise ServiceUnavailableException("Failed to fetch timeline")
        
        logger.debug(
            f"Loaded {len(appointments)} appointments, {len(medications)} medications, "
            f"{len(statuses)} status entries, {len(documents)} documents"
        )
        
        entries = build_timeline(
            doctors,
            appointments,
            medications,
            statuses,
            documents,
            filters=filters,
        )
        
        applied = filters.model_dump(exclude_none=True) if filters else {}
        logger.info(f"Built timeline with {len(entries)} entries (filters={applied})")
        
        return entries
