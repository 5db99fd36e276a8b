from typing import List, Set

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from app.models import Project, Team, project_team


def exists_by_name(db: Session, name: str) -> bool:
    return db.query(Project.id).filter(Project.name == name).first() is not None


def list_all(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.id).all()


def list_by_team(db: Session, team_id: int) -> List[Project]:
    """The reverse view of project_team: every project one team works on."""
    return (
        db.query(Project)
        .join(project_team, project_team.c.project_id == Project.id)
        .filter(project_team.c.team_id == team_id)
        .order_by(Project.id)
        .all()
    )


def search(db: Session, keyword: str) -> List[Project]:
    """Case-insensitive substring match on name or description."""
    return (
        db.query(Project)
        .filter(or_(
            Project.name.icontains(keyword, autoescape=True),
            Project.description.icontains(keyword, autoescape=True)
        ))
        .order_by(Project.id)
        .all()
    )


# ---------------- PROJECT <-> TEAM ROWS ---------------- #

def team_ids_of(db: Session, project_id: int) -> Set[int]:
    rows = db.query(project_team.c.team_id).filter(project_team.c.project_id == project_id).all()
    return {row[0] for row in rows}


def list_teams(db: Session, project_id: int) -> List[Team]:
    return (
        db.query(Team)
        .join(project_team, project_team.c.team_id == Team.id)
        .filter(project_team.c.project_id == project_id)
        .order_by(Team.id)
        .all()
    )


def count_teams(db: Session, project_id: int) -> int:
    return (
        db.query(func.count(project_team.c.team_id))
        .filter(project_team.c.project_id == project_id)
        .scalar()
    )


def count_projects_of_team(db: Session, team_id: int) -> int:
    return (
        db.query(func.count(project_team.c.project_id))
        .filter(project_team.c.team_id == team_id)
        .scalar()
    )


def insert_association(db: Session, project_id: int, team_id: int):
    db.execute(project_team.insert().values(project_id=project_id, team_id=team_id))


def delete_association(db: Session, project_id: int, team_id: int) -> int:
    result = db.execute(
        project_team.delete().where(
            project_team.c.project_id == project_id,
            project_team.c.team_id == team_id
        )
    )
    return result.rowcount


def delete_associations_for_project(db: Session, project_id: int) -> int:
    result = db.execute(project_team.delete().where(project_team.c.project_id == project_id))
    return result.rowcount


def delete_associations_for_team(db: Session, team_id: int) -> int:
    result = db.execute(project_team.delete().where(project_team.c.team_id == team_id))
    return result.rowcount
