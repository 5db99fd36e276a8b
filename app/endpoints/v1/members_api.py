from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.database.session import get_db
from app.schemas import MemberRequest, MemberResponse
from app.utils import member_service

router = APIRouter(prefix="/members", tags=["Members"])

@router.post("", status_code=201, response_model=MemberResponse)
def create_member(
    member_data: MemberRequest,
    db: Session = Depends(get_db)
):
    """
    Creates a team member. teamId is optional.
    """
    return member_service.create_member(db, member_data)

@router.get("", response_model=List[MemberResponse])
def get_all_members(db: Session = Depends(get_db)):
    return member_service.list_members(db)

@router.get("/search", response_model=List[MemberResponse])
def search_members(
    keyword: str,
    db: Session = Depends(get_db)
):
    """
    Case-insensitive search on member names.
    """
    return member_service.search_members_by_name(db, keyword)

@router.get("/role", response_model=List[MemberResponse])
def get_members_by_role(
    role: str,
    db: Session = Depends(get_db)
):
    return member_service.list_members_by_role(db, role)

@router.get("/unassigned", response_model=List[MemberResponse])
def get_unassigned_members(db: Session = Depends(get_db)):
    """
    Members that belong to no team.
    """
    return member_service.list_unassigned_members(db)

@router.get("/team/{team_id}", response_model=List[MemberResponse])
def get_team_members(
    team_id: int,
    db: Session = Depends(get_db)
):
    return member_service.list_members_by_team(db, team_id)

@router.get("/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: int,
    db: Session = Depends(get_db)
):
    return member_service.get_member(db, member_id)

@router.put("/{member_id}", response_model=MemberResponse)
def update_member(
    member_id: int,
    member_data: MemberRequest,
    db: Session = Depends(get_db)
):
    """
    Updates a member. A missing or null teamId removes the member from its team.
    """
    return member_service.update_member(db, member_id, member_data)

@router.put("/{member_id}/assign/{team_id}", response_model=MemberResponse)
def assign_member_to_team(
    member_id: int,
    team_id: int,
    db: Session = Depends(get_db)
):
    return member_service.assign_to_team(db, member_id, team_id)

@router.put("/{member_id}/remove-from-team", response_model=MemberResponse)
def remove_member_from_team(
    member_id: int,
    db: Session = Depends(get_db)
):
    """
    Unassigns a member. Fails with 400 if the member has no team.
    """
    return member_service.remove_from_team(db, member_id)

@router.delete("/{member_id}", status_code=204)
def delete_member(
    member_id: int,
    db: Session = Depends(get_db)
):
    member_service.delete_member(db, member_id)
    return Response(status_code=204)
