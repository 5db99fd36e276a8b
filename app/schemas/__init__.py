from app.schemas.common import CamelModel, ErrorResponse, ValidationErrorResponse
from app.schemas.team_schema import TeamRequest, TeamResponse, TeamSummary, MemberSummary, ProjectSummary
from app.schemas.member_schema import MemberRequest, MemberResponse
from app.schemas.project_schema import ProjectRequest, ProjectResponse

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "ValidationErrorResponse",
    "TeamRequest",
    "TeamResponse",
    "TeamSummary",
    "MemberSummary",
    "ProjectSummary",
    "MemberRequest",
    "MemberResponse",
    "ProjectRequest",
    "ProjectResponse",
]
