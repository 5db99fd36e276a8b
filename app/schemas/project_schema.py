from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.constants import FieldLimits
from app.schemas.common import CamelModel, not_blank
from app.schemas.team_schema import TeamSummary

class ProjectRequest(CamelModel):
    """
    Body of POST /api/projects and PUT /api/projects/{id}.

    team_ids left out (or null) keeps the current assignments on update;
    a list, even an empty one, replaces them.
    """
    name: str = Field(..., max_length=FieldLimits.NAME_MAX)
    description: Optional[str] = Field(None, max_length=FieldLimits.DESCRIPTION_MAX)
    team_ids: Optional[List[int]] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value):
        return not_blank(value, "Project name")

class ProjectResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    teams: List[TeamSummary] = []
    team_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
