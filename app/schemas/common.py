from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

class CamelModel(BaseModel):
    """
    Base for every API model.
    Serializes as camelCase; accepts camelCase or snake_case on input.
    """
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

def not_blank(value: Optional[str], label: str) -> Optional[str]:
    if value is None or not value.strip():
        raise PydanticCustomError("blank", "{label} is required", {"label": label})
    return value

class ErrorResponse(CamelModel):
    status: int
    message: str
    timestamp: datetime

class ValidationErrorResponse(ErrorResponse):
    errors: Dict[str, str] = {}
