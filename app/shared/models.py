from pydantic import Field
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Mixin for adding timestamp fields to documents."""
    
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    
    def update_timestamp(self):
        """Update the updated_at timestamp."""
        self.updated_at = utc_now()
