from typing import Annotated, Any, ClassVar, List, Tuple
from pydantic import BaseModel, BeforeValidator, model_validator


def _coerce_to_list(value: Any) -> Any:
    """Accept a bare string where a list of strings is expected."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    return value


# Older records store some list fields as a single string
StringList = Annotated[List[str], BeforeValidator(_coerce_to_list)]

# HH:MM or HH:MM:SS, accepted on writes
TIME_PATTERN = r"^\d{2}:\d{2}(:\d{2})?$"


class PartialUpdate(BaseModel):
    """
    Base for partial update schemas.
    
    Every field is optional so it can be left out, but fields listed in
    REQUIRED_FIELDS may not be sent as an explicit null: the stored record
    needs a value for them.
    """
    
    REQUIRED_FIELDS: ClassVar[Tuple[str, ...]] = ()
    
    @model_validator(mode="after")
    def reject_null_required_fields(self):
        nulled = [
            name for name in self.REQUIRED_FIELDS
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


class MessageResponse(BaseModel):
    """Plain confirmation message, e.g. after a delete."""
    
    message: str
