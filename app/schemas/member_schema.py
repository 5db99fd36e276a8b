from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from app.constants import FieldLimits
from app.schemas.common import CamelModel, not_blank
from app.schemas.team_schema import TeamSummary

class MemberRequest(CamelModel):
    """
    Body of POST /api/members and PUT /api/members/{id}.
    On update a missing or null teamId unassigns the member.
    """
    name: str = Field(..., max_length=FieldLimits.NAME_MAX)
    email: EmailStr
    role: Optional[str] = Field(None, max_length=FieldLimits.ROLE_MAX)
    team_id: Optional[int] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return not_blank(value, "Name")

    @field_validator("email")
    @classmethod
    def email_length(cls, value):
        if len(value) > FieldLimits.EMAIL_MAX:
            raise PydanticCustomError(
                "too_long",
                "Email must not exceed {limit} characters",
                {"limit": FieldLimits.EMAIL_MAX}
            )
        return value

class MemberResponse(CamelModel):
    id: int
    name: str
    email: str
    role: Optional[str] = None
    team: Optional[TeamSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
