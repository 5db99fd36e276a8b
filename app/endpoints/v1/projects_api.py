from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas import ProjectRequest, ProjectResponse
from app.utils import project_service

router = APIRouter(prefix="/projects", tags=["Projects"])

@router.post("", status_code=201, response_model=ProjectResponse)
def create_project(
    project_data: ProjectRequest,
    db: Session = Depends(get_db)
):
    """
    Creates a new project, optionally assigned to teams.
    Every team id must exist or nothing is created.
    """
    return project_service.create_project(db, project_data)

@router.get("", response_model=List[ProjectResponse])
def get_projects(db: Session = Depends(get_db)):
    """
    Retrieves all projects with their assigned teams.
    """
    return project_service.list_projects(db)

@router.get("/search", response_model=List[ProjectResponse])
def search_projects(
    keyword: str,
    db: Session = Depends(get_db)
):
    return project_service.search_projects(db, keyword)

@router.get("/team/{team_id}", response_model=List[ProjectResponse])
def get_team_projects(
    team_id: int,
    db: Session = Depends(get_db)
):
    """
    Retrieves all projects a team is working on.
    """
    return project_service.list_projects_by_team(db, team_id)

@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: int,
    db: Session = Depends(get_db)
):
    return project_service.get_project(db, project_id)

@router.put("/{project_id}", response_model=ProjectResponse)
def update_project(
    project_id: int,
    project_data: ProjectRequest,
    db: Session = Depends(get_db)
):
    """
    Updates an existing project.
    When teamIds is sent it replaces all team assignments; when omitted they are kept.
    """
    return project_service.update_project(db, project_id, project_data)

@router.post("/{project_id}/teams/{team_id}", response_model=ProjectResponse)
def assign_team(
    project_id: int,
    team_id: int,
    db: Session = Depends(get_db)
):
    return project_service.assign_team(db, project_id, team_id)

@router.delete("/{project_id}/teams/{team_id}", response_model=ProjectResponse)
def remove_team(
    project_id: int,
    team_id: int,
    db: Session = Depends(get_db)
):
    return project_service.remove_team(db, project_id, team_id)

@router.delete("/{project_id}", status_code=204)
def delete_project(
    project_id: int,
    db: Session = Depends(get_db)
):
    """
    Deletes a project. Teams are not deleted, only their assignments.
    """
    project_service.delete_project(db, project_id)
    return Response(status_code=204)
