"""
Keeps the Team <-> TeamMember and Project <-> Team associations consistent.

Entities point at each other by id only. A member's team is the
``team_member.team_id`` column, and a project's teams are rows of the
``project_team`` table. Every reverse view (a team's members, a team's
projects) is a query over those same columns, so both sides always agree
once a function here has flushed.

These functions never commit. They run inside the caller's
``transaction(db)`` block and take part in its commit or rollback.
"""
import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from app.constants import ErrorMessages
from app.exceptions import InvalidOperationError, ResourceNotFoundError
from app.models import Project, Team, TeamMember
from app.repositories import member_repository, project_repository, team_repository

logger = logging.getLogger(__name__)

# ---------------- TEAM <-> MEMBER ---------------- #

def assign_member_to_team(db: Session, member: TeamMember, team: Team) -> TeamMember:
    """
    Points the member at a team, moving it out of any previous team.
    Re-assigning to the current team only refreshes updated_at.
    """
    member.team_id = team.id
    member.touch()
    db.flush()
    return member

def remove_member_from_team(db: Session, member: TeamMember) -> TeamMember:
    """
    Clears the member's team. The member row itself is kept.

    Raises:
        InvalidOperationError: If the member has no team
    """
    if member.team_id is None:
        raise InvalidOperationError(ErrorMessages.MEMBER_NOT_ASSIGNED)
    member.team_id = None
    member.touch()
    db.flush()
    return member

# ---------------- PROJECT <-> TEAM ---------------- #

def add_team_to_project(db: Session, project: Project, team: Team) -> bool:
    """
    Links a team to a project. Adding a team that is already linked is a no-op.

    Returns:
        bool: True if a new association row was written
    """
    if team.id in project_repository.team_ids_of(db, project.id):
        return False
    project_repository.insert_association(db, project.id, team.id)
    project.touch()
    db.flush()
    return True

def remove_team_from_project(db: Session, project: Project, team: Team) -> bool:
    """
    Unlinks a team from a project. Removing a team that is not linked is a no-op.

    Returns:
        bool: True if an association row was deleted
    """
    removed = project_repository.delete_association(db, project.id, team.id)
    if removed:
        project.touch()
        db.flush()
    return bool(removed)

def resolve_teams(db: Session, team_ids: Iterable[int]) -> List[Team]:
    """
    Loads every team id, in request order, without duplicates.

    Raises:
        ResourceNotFoundError: Naming the first id that does not exist
    """
    unique_ids = list(dict.fromkeys(team_ids))
    found = {team.id: team for team in team_repository.get_many(db, unique_ids)}
    for team_id in unique_ids:
        if team_id not in found:
            raise ResourceNotFoundError(ErrorMessages.TEAM_NOT_FOUND.format(team_id))
    return [found[team_id] for team_id in unique_ids]

def replace_project_teams(db: Session, project: Project, team_ids: Iterable[int]) -> List[Team]:
    """
    Makes the project's team set exactly ``team_ids``.

    All ids are resolved before anything is written, so an unknown id leaves
    the current associations untouched. Only the difference between the old
    and new sets is written.

    Args:
        db: Database session
        project: Project being updated
        team_ids: Complete new set of team ids (may be empty)

    Returns:
        list: The teams now assigned

    Raises:
        ResourceNotFoundError: If any team id does not exist
    """
    teams = resolve_teams(db, team_ids)
    wanted = {team.id for team in teams}
    current = project_repository.team_ids_of(db, project.id)

    for team_id in sorted(current - wanted):
        project_repository.delete_association(db, project.id, team_id)
    for team_id in sorted(wanted - current):
        project_repository.insert_association(db, project.id, team_id)

    if wanted != current:
        project.touch()
    db.flush()
    return teams

# ---------------- CASCADE POLICIES ---------------- #

def delete_team_cascade(db: Session, team: Team) -> int:
    """
    Deletes a team together with every member it owns.

    The team's project links are dropped as well; the projects stay.
    Clearing a member's team elsewhere never deletes the member, only
    deleting the team does.

    Returns:
        int: Number of members deleted
    """
    team_id = team.id
    removed_members = member_repository.delete_by_team(db, team_id)
    removed_links = project_repository.delete_associations_for_team(db, team_id)
    db.delete(team)
    db.flush()
    logger.info(
        "Team %s deleted with %s member(s) and %s project link(s)",
        team_id, removed_members, removed_links
    )
    return removed_members

def delete_project_associations_only(db: Session, project: Project) -> int:
    """
    Deletes a project and its project_team rows. Teams are never touched.

    Returns:
        int: Number of team links removed
    """
    project_id = project.id
    removed_links = project_repository.delete_associations_for_project(db, project_id)
    db.delete(project)
    db.flush()
    logger.info("Project %s deleted, %s team link(s) removed", project_id, removed_links)
    return removed_links
