from app.models.team import Team, TeamMember
from app.models.project import Project
from app.models.common import project_team, TimestampMixin

# Export everything for easy access
__all__ = [
    "Team",
    "TeamMember",
    "Project",
    "project_team",
    "TimestampMixin",
]
