import logging
from typing import List

from sqlalchemy.orm import Session

from app.constants import ErrorMessages
from app.database.session import transaction
from app.exceptions import DuplicateResourceError
from app.models import Team
from app.repositories import member_repository, project_repository, team_repository
from app.schemas import MemberSummary, ProjectSummary, TeamRequest, TeamResponse
from app.utils import relationship_manager
from app.utils.common import get_object_or_404

logger = logging.getLogger(__name__)

def team_to_response(db: Session, team: Team, include_members: bool = False) -> TeamResponse:
    """
    Converts a Team model instance to its API view.
    With include_members the member and project lists are loaded too.
    """
    response = TeamResponse(
        id=team.id,
        name=team.name,
        description=team.description,
        member_count=member_repository.count_by_team(db, team.id),
        project_count=project_repository.count_projects_of_team(db, team.id),
        created_at=team.created_at,
        updated_at=team.updated_at
    )
    if not include_members:
        return response

    members = member_repository.list_by_team(db, team.id)
    projects = project_repository.list_by_team(db, team.id)
    response.members = [
        MemberSummary(id=m.id, name=m.name, email=m.email, role=m.role)
        for m in members
    ]
    response.projects = [
        ProjectSummary(id=p.id, name=p.name, team_count=project_repository.count_teams(db, p.id))
        for p in projects
    ]
    return response

def create_team(db: Session, team_data: TeamRequest) -> TeamResponse:
    """
    Creates a new team.

    Args:
        db: Database session
        team_data: Team creation data (name, description)

    Returns:
        TeamResponse: The created team, with no members or projects yet

    Raises:
        DuplicateResourceError: If the team name is taken
    """
    if team_repository.exists_by_name(db, team_data.name):
        raise DuplicateResourceError(ErrorMessages.TEAM_NAME_EXISTS.format(team_data.name))

    team = Team(name=team_data.name, description=team_data.description)
    with transaction(db):
        db.add(team)

    logger.info("Team created: id=%s name=%r", team.id, team.name)
    return team_to_response(db, team)

def get_team(db: Session, team_id: int) -> TeamResponse:
    """
    Retrieves a team by ID.

    Raises:
        ResourceNotFoundError: If team not found
    """
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)
    return team_to_response(db, team)

def get_team_with_members(db: Session, team_id: int) -> TeamResponse:
    """
    Retrieves a team by ID including its members and projects.

    Raises:
        ResourceNotFoundError: If team not found
    """
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)
    return team_to_response(db, team, include_members=True)

def list_teams(db: Session) -> List[TeamResponse]:
    return [team_to_response(db, t) for t in team_repository.list_all(db)]

def list_teams_with_members(db: Session) -> List[TeamResponse]:
    return [team_to_response(db, t, include_members=True) for t in team_repository.list_all(db)]

def search_teams_by_name(db: Session, keyword: str) -> List[TeamResponse]:
    """
    Teams whose name contains the keyword, ignoring case.
    """
    return [team_to_response(db, t) for t in team_repository.search_by_name(db, keyword)]

def update_team(db: Session, team_id: int, team_data: TeamRequest) -> TeamResponse:
    """
    Updates an existing team's name and description.

    Args:
        db: Database session
        team_id: Team ID
        team_data: New values

    Returns:
        TeamResponse: Updated team data

    Raises:
        ResourceNotFoundError: If team not found
        DuplicateResourceError: If the new name belongs to another team
    """
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)

    if team.name != team_data.name and team_repository.exists_by_name(db, team_data.name):
        raise DuplicateResourceError(ErrorMessages.TEAM_NAME_EXISTS.format(team_data.name))

    with transaction(db):
        team.name = team_data.name
        team.description = team_data.description
        team.touch()

    return team_to_response(db, team)

def delete_team(db: Session, team_id: int) -> int:
    """
    Deletes a team and every member assigned to it.

    Returns:
        int: Number of members deleted along with the team

    Raises:
        ResourceNotFoundError: If team not found
    """
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)
    with transaction(db):
        removed_members = relationship_manager.delete_team_cascade(db, team)
    return removed_members
