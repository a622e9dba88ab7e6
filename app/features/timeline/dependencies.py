# Timeline Feature - Dependencies

from datetime import date
from typing import Optional
from fastapi import Query
from app.features.timeline.schemas import TimelineFilter
from app.shared.exceptions import BadRequestException


def parse_kinds(value: Optional[str]) -> Optional[frozenset]:
    """Split a comma-separated kinds parameter. Blank input means no restriction."""
    if not value:
        return None
    kinds = frozenset(part.strip() for part in value.split(",") if part.strip())
    return kinds or None


def _either(value, legacy_value):
    return value if value is not None else legacy_value


async def get_timeline_filter(
    start_date: Optional[date] = Query(None, description="Earliest entry date (inclusive)"),
    end_date: Optional[date] = Query(None, description="Latest entry date (inclusive)"),
    kinds: Optional[str] = Query(
        None,
        description="Comma-separated kinds to include: appointment, medication, status, document",
    ),
    doctor_id: Optional[str] = Query(None, description="Only entries linked to this doctor (entries without a doctor are kept)"),
    min_pain_level: Optional[int] = Query(None, ge=0, le=10, description="Minimum pain level for status entries"),
    max_pain_level: Optional[int] = Query(None, ge=0, le=10, description="Maximum pain level for status entries"),
    # camelCase names used by older clients
    start_date_legacy: Optional[date] = Query(None, alias="startDate", include_in_schema=False),
    end_date_legacy: Optional[date] = Query(None, alias="endDate", include_in_schema=False),
    kinds_legacy: Optional[str] = Query(None, alias="types", include_in_schema=False),
    doctor_id_legacy: Optional[str] = Query(None, alias="doctorId", include_in_schema=False),
    min_pain_level_legacy: Optional[int] = Query(None, alias="minPainLevel", ge=0, le=10, include_in_schema=False),
    max_pain_level_legacy: Optional[int] = Query(None, alias="maxPainLevel", ge=0, le=10, include_in_schema=False),
) -> TimelineFilter:
    """
    Dependency that maps timeline query parameters to a TimelineFilter.

    Each filter option is one query parameter. The snake_case name wins when
    a camelCase alias is sent as well.

    Raises:
        BadRequestException: If a date or pain range is inverted
    """
    filters = TimelineFilter(
        start_date=_either(start_date, start_date_legacy),
        end_date=_either(end_date, end_date_legacy),
        kinds=parse_kinds(_either(kinds, kinds_legacy)),
        doctor_id=_either(doctor_id, doctor_id_legacy) or None,
        min_pain_level=_either(min_pain_level, min_pain_level_legacy),
        max_pain_level=_either(max_pain_level, max_pain_level_legacy),
    )

    if filters.start_date and filters.end_date and filters.start_date > filters.end_date:
        raise BadRequestException("start_date must not be after end_date")
    if (
        filters.min_pain_level is not None
        and filters.max_pain_level is not None
        and filters.min_pain_level > filters.max_pain_level
    ):
        raise BadRequestException("min_pain_level must not be greater than max_pain_level")

    return filters
