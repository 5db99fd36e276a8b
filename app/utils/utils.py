from typing import Optional

from sqlalchemy.orm import Session

from app.models import Team
from app.repositories import member_repository
from app.schemas import TeamSummary

def team_summary(db: Session, team: Team, member_count: Optional[int] = None) -> TeamSummary:
    """
    Compact team view embedded in member and project responses.
    Pass member_count when it is already known to skip the count query.
    """
    if member_count is None:
        member_count = member_repository.count_by_team(db, team.id)
    return TeamSummary(id=team.id, name=team.name, member_count=member_count)
