import logging
from typing import List

from sqlalchemy.orm import Session

from app.constants import ErrorMessages
from app.database.session import transaction
from app.exceptions import DuplicateResourceError, ResourceNotFoundError
from app.models import Team, TeamMember
from app.repositories import member_repository, team_repository
from app.schemas import MemberRequest, MemberResponse
from app.utils import relationship_manager
from app.utils.common import get_object_or_404
from app.utils.utils import team_summary

logger = logging.getLogger(__name__)

def member_to_response(db: Session, member: TeamMember) -> MemberResponse:
    team = db.get(Team, member.team_id) if member.team_id is not None else None
    return MemberResponse(
        id=member.id,
        name=member.name,
        email=member.email,
        role=member.role,
        team=team_summary(db, team) if team else None,
        created_at=member.created_at,
        updated_at=member.updated_at
    )

def _ensure_email_free(db: Session, email: str):
    if member_repository.exists_by_email(db, email):
        raise DuplicateResourceError(ErrorMessages.MEMBER_EMAIL_EXISTS.format(email))

def _ensure_team_exists(db: Session, team_id: int):
    if not team_repository.exists(db, team_id):
        raise ResourceNotFoundError(ErrorMessages.TEAM_NOT_FOUND.format(team_id))

def create_member(db: Session, member_data: MemberRequest) -> MemberResponse:
    """
    Creates a team member, optionally assigned to a team.

    Args:
        db: Database session
        member_data: Name, email, role and optional team id

    Returns:
        MemberResponse: The created member

    Raises:
        DuplicateResourceError: If the email is already registered
        ResourceNotFoundError: If team_id is given but does not exist
    """
    _ensure_email_free(db, member_data.email)

    team = None
    if member_data.team_id is not None:
        team = get_object_or_404(db, Team, member_data.team_id, ErrorMessages.TEAM_NOT_FOUND)

    member = TeamMember(
        name=member_data.name,
        email=member_data.email,
        role=member_data.role
    )
    with transaction(db):
        db.add(member)
        if team is not None:
            relationship_manager.assign_member_to_team(db, member, team)

    logger.info("Member created: id=%s team_id=%s", member.id, member.team_id)
    return member_to_response(db, member)

def get_member(db: Session, member_id: int) -> MemberResponse:
    member = get_object_or_404(db, TeamMember, member_id, ErrorMessages.MEMBER_NOT_FOUND)
    return member_to_response(db, member)

def list_members(db: Session) -> List[MemberResponse]:
    return [member_to_response(db, m) for m in member_repository.list_all(db)]

def list_members_by_team(db: Session, team_id: int) -> List[MemberResponse]:
    """
    Members currently assigned to a team.

    Raises:
        ResourceNotFoundError: If team not found
    """
    _ensure_team_exists(db, team_id)
    return [member_to_response(db, m) for m in member_repository.list_by_team(db, team_id)]

def list_unassigned_members(db: Session) -> List[MemberResponse]:
    return [member_to_response(db, m) for m in member_repository.list_unassigned(db)]

def list_members_by_role(db: Session, role: str) -> List[MemberResponse]:
    return [member_to_response(db, m) for m in member_repository.list_by_role(db, role)]

def search_members_by_name(db: Session, keyword: str) -> List[MemberResponse]:
    return [member_to_response(db, m) for m in member_repository.search_by_name(db, keyword)]

def update_member(db: Session, member_id: int, member_data: MemberRequest) -> MemberResponse:
    """
    Replaces a member's fields and team assignment.

    A null team_id unassigns the member; it does not mean "keep the
    current team".

    Raises:
        ResourceNotFoundError: If the member or the given team does not exist
        DuplicateResourceError: If the new email belongs to another member
    """
    member = get_object_or_404(db, TeamMember, member_id, ErrorMessages.MEMBER_NOT_FOUND)

    if member.email != member_data.email:
        _ensure_email_free(db, member_data.email)

    team = None
    if member_data.team_id is not None:
        team = get_object_or_404(db, Team, member_data.team_id, ErrorMessages.TEAM_NOT_FOUND)

    with transaction(db):
        member.name = member_data.name
        member.email = member_data.email
        member.role = member_data.role
        if team is not None:
            relationship_manager.assign_member_to_team(db, member, team)
        elif member.team_id is not None:
            relationship_manager.remove_member_from_team(db, member)
        else:
            member.touch()

    return member_to_response(db, member)

def assign_to_team(db: Session, member_id: int, team_id: int) -> MemberResponse:
    """
    Moves a member into a team.

    Raises:
        ResourceNotFoundError: If the member or team does not exist
    """
    member = get_object_or_404(db, TeamMember, member_id, ErrorMessages.MEMBER_NOT_FOUND)
    team = get_object_or_404(db, Team, team_id, ErrorMessages.TEAM_NOT_FOUND)

    with transaction(db):
        relationship_manager.assign_member_to_team(db, member, team)

    return member_to_response(db, member)

def remove_from_team(db: Session, member_id: int) -> MemberResponse:
    """
    Unassigns a member from its team. The member is kept.

    Raises:
        ResourceNotFoundError: If member not found
        InvalidOperationError: If the member has no team
    """
    member = get_object_or_404(db, TeamMember, member_id, ErrorMessages.MEMBER_NOT_FOUND)

    with transaction(db):
        relationship_manager.remove_member_from_team(db, member)

    return member_to_response(db, member)

def delete_member(db: Session, member_id: int):
    member = get_object_or_404(db, TeamMember, member_id, ErrorMessages.MEMBER_NOT_FOUND)
    with transaction(db):
        db.delete(member)
    logger.info("Member deleted: id=%s", member_id)
