from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models import TeamMember


def exists_by_email(db: Session, email: str) -> bool:
    return db.query(TeamMember.id).filter(TeamMember.email == email).first() is not None


def list_all(db: Session) -> List[TeamMember]:
    return db.query(TeamMember).order_by(TeamMember.id).all()


def list_by_team(db: Session, team_id: int) -> List[TeamMember]:
    """The reverse view of TeamMember.team_id: every member of one team."""
    return (
        db.query(TeamMember)
        .filter(TeamMember.team_id == team_id)
        .order_by(TeamMember.id)
        .all()
    )


def list_unassigned(db: Session) -> List[TeamMember]:
    return (
        db.query(TeamMember)
        .filter(TeamMember.team_id.is_(None))
        .order_by(TeamMember.id)
        .all()
    )


def list_by_role(db: Session, role: str) -> List[TeamMember]:
    return db.query(TeamMember).filter(TeamMember.role == role).order_by(TeamMember.id).all()


def search_by_name(db: Session, keyword: str) -> List[TeamMember]:
    return (
        db.query(TeamMember)
        .filter(TeamMember.name.icontains(keyword, autoescape=True))
        .order_by(TeamMember.id)
        .all()
    )


def count_by_team(db: Session, team_id: int) -> int:
    return db.query(func.count(TeamMember.id)).filter(TeamMember.team_id == team_id).scalar()


def count_by_teams(db: Session, team_ids) -> dict:
    """
    Member counts for several teams in one query.

    Returns:
        dict: team id -> member count (teams without members are absent)
    """
    if not team_ids:
        return {}
    rows = (
        db.query(TeamMember.team_id, func.count(TeamMember.id))
        .filter(TeamMember.team_id.in_(list(team_ids)))
        .group_by(TeamMember.team_id)
        .all()
    )
    return {team_id: count for team_id, count in rows}


def delete_by_team(db: Session, team_id: int) -> int:
    return (
        db.query(TeamMember)
        .filter(TeamMember.team_id == team_id)
        .delete(synchronize_session="fetch")
    )
