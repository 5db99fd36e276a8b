from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.constants import FieldLimits
from app.schemas.common import CamelModel, not_blank

class TeamRequest(CamelModel):
    """Body of POST /api/teams and PUT /api/teams/{id}."""
    name: str = Field(..., max_length=FieldLimits.NAME_MAX)
    description: Optional[str] = Field(None, max_length=FieldLimits.DESCRIPTION_MAX)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return not_blank(value, "Team name")

class TeamSummary(CamelModel):
    id: int
    name: str
    member_count: int = 0

class MemberSummary(CamelModel):
    id: int
    name: str
    email: str
    role: Optional[str] = None

class ProjectSummary(CamelModel):
    id: int
    name: str
    team_count: int = 0

class TeamResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    member_count: int = 0
    project_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Only filled by the includeMembers reads
    members: Optional[List[MemberSummary]] = None
    projects: Optional[List[ProjectSummary]] = None
