from typing import List

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas import TeamRequest, TeamResponse
from app.utils import team_service

router = APIRouter(prefix="/teams", tags=["Teams"])

@router.post("", status_code=201, response_model=TeamResponse)
def create_team(
    team_data: TeamRequest,
    db: Session = Depends(get_db)
):
    """
    Creates a new team.
    """
    return team_service.create_team(db, team_data)

@router.get("", response_model=List[TeamResponse])
def get_all_teams(
    include_members: bool = Query(False, alias="includeMembers"),
    db: Session = Depends(get_db)
):
    """
    Retrieves all teams.
    With includeMembers=true each team also lists its members and projects.
    """
    if include_members:
        return team_service.list_teams_with_members(db)
    return team_service.list_teams(db)

@router.get("/search", response_model=List[TeamResponse])
def search_teams(
    keyword: str,
    db: Session = Depends(get_db)
):
    """
    Case-insensitive search on team names.
    """
    return team_service.search_teams_by_name(db, keyword)

@router.get("/{team_id}", response_model=TeamResponse)
def get_team(
    team_id: int,
    include_members: bool = Query(False, alias="includeMembers"),
    db: Session = Depends(get_db)
):
    """
    Retrieves details of a specific team.
    """
    if include_members:
        return team_service.get_team_with_members(db, team_id)
    return team_service.get_team(db, team_id)

@router.get("/{team_id}/stats", response_model=TeamResponse)
def get_team_stats(
    team_id: int,
    db: Session = Depends(get_db)
):
    """
    Member and project counts for a team.
    """
    return team_service.get_team(db, team_id)

@router.put("/{team_id}", response_model=TeamResponse)
def update_team(
    team_id: int,
    team_data: TeamRequest,
    db: Session = Depends(get_db)
):
    return team_service.update_team(db, team_id, team_data)

@router.delete("/{team_id}", status_code=204)
def delete_team(
    team_id: int,
    db: Session = Depends(get_db)
):
    """
    Deletes a team. Members of the team are deleted with it.
    """
    team_service.delete_team(db, team_id)
    return Response(status_code=204)
