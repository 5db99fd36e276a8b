import logging
from typing import List

from sqlalchemy.orm import Session

from app.constants import ErrorMessages
from app.database.session import transaction
from app.exceptions import DuplicateResourceError, ResourceNotFoundError
from app.models import Project, Team
from app.repositories import member_repository, project_repository, team_repository
from app.schemas import ProjectRequest, ProjectResponse
from app.utils import relationship_manager
from app.utils.common import get_object_or_404
from app.utils.utils import team_summary

logger = logging.getLogger(__name__)

def project_to_response(db: Session, project: Project) -> ProjectResponse:
    """
    Converts a Project model instance to its API view with assigned teams.
    """
    teams = project_repository.list_teams(db, project.id)
    member_counts = member_repository.count_by_teams(db, [t.id for t in teams])
    return ProjectResponse(
        id=project.id,
        name=project.name,
        description=project.description,
        teams=[team_summary(db, t, member_counts.get(t.id, 0)) for t in teams],
        team_count=len(teams),
        created_at=project.created_at,
        updated_at=project.updated_at
    )

def create_project(db: Session, project_data: ProjectRequest) -> ProjectResponse:
    """
    Creates a project and its team assignments together.

    Args:
        db: Database session
        project_data: Name, description and optional team ids

    Returns:
        ProjectResponse: The created project

    Raises:
        DuplicateResourceError: If the project name is taken
        ResourceNotFoundError: If any team id does not exist; nothing is saved
    """
    if project_repository.exists_by_name(db, project_data.name):
        raise DuplicateResourceError(ErrorMessages.PROJECT_NAME_EXISTS.format(project_data.name))

    teams = relationship_manager.resolve_teams(db, project_data.team_ids or [])

    project = Project(name=project_data.name, description=project_data.description)
    with transaction(db):
        db.add(project)
        db.flush()
        for team in teams:
            relationship_manager.add_team_to_project(db, project, team)

    logger.info("Project created: id=%s teams=%s", project.id, [t.id for t in teams])
    return project_to_response(db, project)

def get_project(db: Session, project_id: int) -> ProjectResponse:
    project = get_object_or_404(db, Project, project_id, ErrorMessages.PROJECT_NOT_FOUND)
    return project_to_response(db, project)

def list_projects(db: Session) -> List[ProjectResponse]:
    return [project_to_response(db, p) for p in project_repository.list_all(db)]

def list_projects_by_team(db: Session, team_id: int) -> List[ProjectResponse]:
    """
    Projects a team is assigned to.

    Raises:
        ResourceNotFoundError: If team not found
    """
    if not team_repository.exists(db, team_id):
        raise ResourceNotFoundError(ErrorMessages.TEAM_NOT_FOUND.format(team_id))
    return [project_to_response(db, p) for p in project_repository.list_by_team(db, team_id)]

def search_projects(db: Session, keyword: str) -> List[ProjectResponse]:
    """Matches the keyword against name or description, ignoring case."""
    return [project_to_response(db, p) for p in project_repository.search(db, keyword)]

def update_project(db: Session, project_id: int, project_data: ProjectRequest) -> ProjectResponse:
    """
    Updates a project's fields and, when team_ids is given, its teams.

    Args:
        db: Database session
        project_id: Project ID
        project_data: New values. team_ids=None keeps the current teams,
            any list (even empty) replaces them.

    Returns:
        ProjectResponse: Updated project data

    Raises:
        ResourceNotFoundError: If the project or any team id does not exist
        DuplicateResourceError: If the new name belongs to another project
    """
    project = get_object_or_404(db, Project, project_id, ErrorMessages.PROJECT_NOT_FOUND)

    if project.name != project_data.name and project_repository.exists_by_name(db, project_data.name):
        raise DuplicateResourceError(ErrorMessages.PROJECT_NAME_EXISTS.format(project_data.name))

    with transaction(db):
        if project_data.team_ids is not None:
            relationship_manager.replace_project_teams(db, project, project_data.team_ids)
        project.name = project_data.name
        project.description = project_data.description
        project.touch()

    return project_to_response(db, project)

def assign_team(db: Session, project_id: int, team_id: int) -> ProjectResponse:
    """
    Adds one team to a project. Assigning an already assigned team changes nothing.

    Raises:
        ResourceNotFoundError: If the project or team does not exist
    """
    project = get_object_or_404(db, Project, project_id, ErrorMessages.PROJECT_NOT_FOUND)
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)

    with transaction(db):
        relationship_manager.add_team_to_project(db, project, team)

    return project_to_response(db, project)

def remove_team(db: Session, project_id: int, team_id: int) -> ProjectResponse:
    """
    Removes one team from a project. Removing a team that is not assigned changes nothing.

    Raises:
        ResourceNotFoundError: If the project or team does not exist
    """
    project = get_object_or_404(db, Project, project_id, ErrorMessages.PROJECT_NOT_FOUND)
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)

    with transaction(db):
        relationship_manager.remove_team_from_project(db, project, team)

    return project_to_response(db, project)

def delete_project(db: Session, project_id: int):
    """
    Deletes a project. Its teams are kept; only the assignments go.

    Raises:
        ResourceNotFoundError: If project not found
    """
    project = get_object_or_404(db, Project, project_id, ErrorMessages.PROJECT_NOT_FOUND)
    with transaction(db):
        relationship_manager.delete_project_associations_only(db, project)
