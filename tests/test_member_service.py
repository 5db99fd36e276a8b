"""
Tests for the team member service.
"""
import pytest

from app.exceptions import DuplicateResourceError, InvalidOperationError, ResourceNotFoundError
from app.models import TeamMember
from app.repositories import member_repository
from app.schemas import MemberRequest
from app.utils import member_service


def _request(name="Ada", email="ada@corp.io", role=None, team_id=None):
    return MemberRequest(name=name, email=email, role=role, team_id=team_id)


class TestCreateMember:
    def test_create_without_team_is_unassigned(self, db, make_member):
        member = make_member("Ada", "a@x.com")

        assert member.team is None
        assert [m.email for m in member_service.list_unassigned_members(db)] == ["a@x.com"]

    def test_create_with_team_embeds_summary(self, db, make_team, make_member):
        eng = make_team("Engineering")

        member = make_member("Ada", "ada@corp.io", "Developer", eng.id)

        assert member.team.id == eng.id
        assert member.team.name == "Engineering"
        assert member.team.member_count == 1
        assert member.role == "Developer"

    def test_create_with_unknown_team_saves_nothing(self, db):
        with pytest.raises(ResourceNotFoundError):
            member_service.create_member(db, _request(team_id=12))

        assert db.query(TeamMember).count() == 0

    def test_duplicate_email_is_rejected(self, db, make_member):
        make_member("Ada", "ada@corp.io")

        with pytest.raises(DuplicateResourceError):
            make_member("Other Ada", "ada@corp.io")

        assert db.query(TeamMember).count() == 1


class TestReadMembers:
    def test_list_by_team_requires_team(self, db):
        with pytest.raises(ResourceNotFoundError):
            member_service.list_members_by_team(db, 3)

    def test_list_by_team_role_and_search(self, db, make_team, make_member):
        eng = make_team("Engineering")
        make_member("Ada Lovelace", "ada@corp.io", "Developer", eng.id)
        make_member("Grace Hopper", "grace@corp.io", "Admiral")
        make_member("Adam Smith", "adam@corp.io", "Developer")

        by_team = member_service.list_members_by_team(db, eng.id)
        by_role = member_service.list_members_by_role(db, "Developer")
        found = member_service.search_members_by_name(db, "ADA")

        assert [m.email for m in by_team] == ["ada@corp.io"]
        assert [m.email for m in by_role] == ["ada@corp.io", "adam@corp.io"]
        assert [m.email for m in found] == ["ada@corp.io", "adam@corp.io"]
        assert len(member_service.list_members(db)) == 3

    def test_get_missing_member(self, db):
        with pytest.raises(ResourceNotFoundError):
            member_service.get_member(db, 5)


class TestUpdateMember:
    def test_update_reassigns_team(self, db, make_team, make_member):
        eng = make_team("Engineering")
        design = make_team("Design")
        member = make_member("Ada", "ada@corp.io", team_id=eng.id)

        updated = member_service.update_member(db, member.id, _request(role="Lead", team_id=design.id))

        assert updated.team.id == design.id
        assert updated.role == "Lead"
        assert member_repository.count_by_team(db, eng.id) == 0

    def test_update_without_team_unassigns(self, db, make_team, make_member):
        eng = make_team("Engineering")
        member = make_member("Ada", "ada@corp.io", team_id=eng.id)

        updated = member_service.update_member(db, member.id, _request())

        assert updated.team is None
        assert member_repository.count_by_team(db, eng.id) == 0

    def test_update_email_collision(self, db, make_member):
        make_member("Ada", "ada@corp.io")
        grace = make_member("Grace", "grace@corp.io")

        with pytest.raises(DuplicateResourceError):
            member_service.update_member(db, grace.id, _request(name="Grace", email="ada@corp.io"))

        assert db.get(TeamMember, grace.id).email == "grace@corp.io"

    def test_update_keeping_own_email(self, db, make_member):
        ada = make_member("Ada", "ada@corp.io")

        updated = member_service.update_member(db, ada.id, _request(name="Ada L."))

        assert updated.name == "Ada L."

    def test_update_with_unknown_team_changes_nothing(self, db, make_member):
        ada = make_member("Ada", "ada@corp.io")

        with pytest.raises(ResourceNotFoundError):
            member_service.update_member(db, ada.id, _request(name="Renamed", team_id=77))

        assert db.get(TeamMember, ada.id).name == "Ada"

    def test_update_missing_member(self, db):
        with pytest.raises(ResourceNotFoundError):
            member_service.update_member(db, 1, _request())


class TestTeamAssignment:
    def test_assign_and_remove(self, db, make_team, make_member):
        eng = make_team("Engineering")
        ada = make_member("Ada", "ada@corp.io")

        assigned = member_service.assign_to_team(db, ada.id, eng.id)
        assert assigned.team.id == eng.id
        assert [m.id for m in member_service.list_members_by_team(db, eng.id)] == [ada.id]

        removed = member_service.remove_from_team(db, ada.id)
        assert removed.team is None
        assert member_service.list_members_by_team(db, eng.id) == []
        assert db.get(TeamMember, ada.id) is not None

    def test_assign_unknown_ids(self, db, make_team, make_member):
        eng = make_team("Engineering")
        ada = make_member("Ada", "ada@corp.io")

        with pytest.raises(ResourceNotFoundError):
            member_service.assign_to_team(db, 999, eng.id)
        with pytest.raises(ResourceNotFoundError):
            member_service.assign_to_team(db, ada.id, 999)

    def test_remove_unassigned_member_fails(self, db, make_member):
        ada = make_member("Ada", "ada@corp.io")

        with pytest.raises(InvalidOperationError):
            member_service.remove_from_team(db, ada.id)

        assert member_service.get_member(db, ada.id).updated_at == ada.updated_at

    def test_remove_missing_member(self, db):
        with pytest.raises(ResourceNotFoundError):
            member_service.remove_from_team(db, 8)


class TestDeleteMember:
    def test_delete_member(self, db, make_team, make_member):
        eng = make_team("Engineering")
        ada = make_member("Ada", "ada@corp.io", team_id=eng.id)

        member_service.delete_member(db, ada.id)

        assert db.get(TeamMember, ada.id) is None
        assert member_repository.count_by_team(db, eng.id) == 0

    def test_delete_missing_member(self, db):
        with pytest.raises(ResourceNotFoundError):
            member_service.delete_member(db, 4)
