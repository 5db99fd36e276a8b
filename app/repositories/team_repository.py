from typing import List

from sqlalchemy.orm import Session

from app.models import Team


def exists(db: Session, team_id: int) -> bool:
    return db.query(Team.id).filter(Team.id == team_id).first() is not None


def exists_by_name(db: Session, name: str) -> bool:
    return db.query(Team.id).filter(Team.name == name).first() is not None


def list_all(db: Session) -> List[Team]:
    return db.query(Team).order_by(Team.id).all()


def search_by_name(db: Session, keyword: str) -> List[Team]:
    """Case-insensitive substring match on the team name."""
    return (
        db.query(Team)
        .filter(Team.name.icontains(keyword, autoescape=True))
        .order_by(Team.id)
        .all()
    )


def get_many(db: Session, team_ids) -> List[Team]:
    if not team_ids:
        return []
    return db.query(Team).filter(Team.id.in_(list(team_ids))).order_by(Team.id).all()
