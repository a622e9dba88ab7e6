# Timeline Feature - Router

from typing import List
from fastapi import APIRouter, Depends
from app.features.timeline.dependencies import get_timeline_filter
from app.features.timeline.schemas import TimelineEntry, TimelineFilter
from app.features.timeline.service import TimelineService


router = APIRouter(prefix="/timeline", tags=["Timeline"])


@router.get("", response_model=List[TimelineEntry])
async def get_timeline(filters: TimelineFilter = Depends(get_timeline_filter)):
    """
    Get the merged timeline of appointments, medications, status entries
    and documents, most recent first.
    
    - **start_date** / **end_date**: Inclusive date range
    - **kinds**: Comma-separated kinds to include
    - **doctor_id**: Narrow doctor-linked entries to one doctor
    - **min_pain_level** / **max_pain_level**: Narrow status entries by pain
    
    Entries are keyed by (kind, id); ids are only unique within a kind.
    """
    return await TimelineService.get_timeline(filters)
