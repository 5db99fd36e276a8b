"""
Tests for the project service.
"""
import pytest

from app.exceptions import DuplicateResourceError, ResourceNotFoundError
from app.models import Project, Team
from app.repositories import project_repository
from app.schemas import ProjectRequest
from app.utils import project_service, team_service


def _team_ids(project):
    return sorted(t.id for t in project.teams)


class TestCreateProject:
    def test_create_with_teams(self, db, make_team, make_member, make_project):
        eng = make_team("Engineering")
        design = make_team("Design")
        make_member("Ada", "ada@corp.io", team_id=eng.id)

        project = make_project("Apollo", "Moon", team_ids=[eng.id, design.id])

        assert project.team_count == 2
        assert _team_ids(project) == sorted([eng.id, design.id])
        assert {t.name: t.member_count for t in project.teams} == {"Engineering": 1, "Design": 0}
        assert team_service.get_team(db, eng.id).project_count == 1

    def test_create_without_teams(self, make_project):
        project = make_project("Apollo")

        assert project.teams == []
        assert project.team_count == 0

    def test_missing_team_creates_nothing(self, db, make_team):
        t1 = make_team("T1")

        with pytest.raises(ResourceNotFoundError) as exc_info:
            project_service.create_project(db, ProjectRequest(name="P1", team_ids=[t1.id, 555]))

        assert "555" in exc_info.value.message
        assert db.query(Project).filter(Project.name == "P1").count() == 0
        assert project_repository.count_projects_of_team(db, t1.id) == 0

    def test_duplicate_name(self, db, make_project):
        make_project("Apollo")

        with pytest.raises(DuplicateResourceError):
            make_project("Apollo")

        assert db.query(Project).count() == 1


class TestReadProjects:
    def test_list_by_team(self, db, make_team, make_project):
        eng = make_team("Engineering")
        make_project("Apollo", team_ids=[eng.id])
        make_project("Gemini")

        projects = project_service.list_projects_by_team(db, eng.id)

        assert [p.name for p in projects] == ["Apollo"]
        assert len(project_service.list_projects(db)) == 2

    def test_list_by_missing_team(self, db):
        with pytest.raises(ResourceNotFoundError):
            project_service.list_projects_by_team(db, 31)

    def test_search_matches_name_or_description(self, db, make_project):
        make_project("Apollo", "Crewed lunar landing")
        make_project("Lunar Gateway", None)
        make_project("Voyager", "Outer planets")

        names = [p.name for p in project_service.search_projects(db, "LUNAR")]

        assert names == ["Apollo", "Lunar Gateway"]

    def test_get_missing_project(self, db):
        with pytest.raises(ResourceNotFoundError):
            project_service.get_project(db, 2)


class TestUpdateProject:
    def test_replace_teams(self, db, make_team, make_project):
        t1, t2, t3 = make_team("T1"), make_team("T2"), make_team("T3")
        project = make_project("P", team_ids=[t1.id, t2.id])

        updated = project_service.update_project(
            db, project.id, ProjectRequest(name="P", team_ids=[t2.id, t3.id])
        )

        assert _team_ids(updated) == sorted([t2.id, t3.id])
        assert project_service.list_projects_by_team(db, t1.id) == []
        assert [p.id for p in project_service.list_projects_by_team(db, t2.id)] == [project.id]
        assert [p.id for p in project_service.list_projects_by_team(db, t3.id)] == [project.id]

    def test_omitted_team_ids_keep_assignments(self, db, make_team, make_project):
        t1 = make_team("T1")
        project = make_project("P", team_ids=[t1.id])

        updated = project_service.update_project(
            db, project.id, ProjectRequest(name="P2", description="renamed")
        )

        assert updated.name == "P2"
        assert _team_ids(updated) == [t1.id]

    def test_empty_team_ids_clear_assignments(self, db, make_team, make_project):
        t1 = make_team("T1")
        project = make_project("P", team_ids=[t1.id])

        updated = project_service.update_project(db, project.id, ProjectRequest(name="P", team_ids=[]))

        assert updated.teams == []
        assert db.get(Team, t1.id) is not None

    def test_unknown_team_rolls_back_everything(self, db, make_team, make_project):
        t1 = make_team("T1")
        project = make_project("P", team_ids=[t1.id])

        with pytest.raises(ResourceNotFoundError):
            project_service.update_project(
                db, project.id, ProjectRequest(name="Renamed", team_ids=[999])
            )

        unchanged = project_service.get_project(db, project.id)
        assert unchanged.name == "P"
        assert _team_ids(unchanged) == [t1.id]

    def test_rename_to_taken_name(self, db, make_project):
        make_project("Apollo")
        gemini = make_project("Gemini")

        with pytest.raises(DuplicateResourceError):
            project_service.update_project(db, gemini.id, ProjectRequest(name="Apollo"))

    def test_update_missing_project(self, db):
        with pytest.raises(ResourceNotFoundError):
            project_service.update_project(db, 3, ProjectRequest(name="X"))


class TestProjectTeamAssignment:
    def test_assign_twice_is_idempotent(self, db, make_team, make_project):
        eng = make_team("Engineering")
        project = make_project("Apollo")

        first = project_service.assign_team(db, project.id, eng.id)
        second = project_service.assign_team(db, project.id, eng.id)

        assert _team_ids(first) == _team_ids(second) == [eng.id]

    def test_remove_team(self, db, make_team, make_project):
        eng = make_team("Engineering")
        project = make_project("Apollo", team_ids=[eng.id])

        updated = project_service.remove_team(db, project.id, eng.id)

        assert updated.teams == []
        assert team_service.get_team(db, eng.id).project_count == 0

    def test_remove_unassigned_team_is_silent(self, db, make_team, make_project):
        eng = make_team("Engineering")
        project = make_project("Apollo")

        updated = project_service.remove_team(db, project.id, eng.id)

        assert updated.teams == []

    @pytest.mark.parametrize("operation", [project_service.assign_team, project_service.remove_team])
    def test_unknown_ids(self, db, make_team, make_project, operation):
        eng = make_team("Engineering")
        project = make_project("Apollo")

        with pytest.raises(ResourceNotFoundError):
            operation(db, 404, eng.id)
        with pytest.raises(ResourceNotFoundError):
            operation(db, project.id, 404)


class TestDeleteProject:
    def test_delete_keeps_teams_unchanged(self, db, make_team, make_member, make_project):
        eng = make_team("Engineering", "core")
        make_member("Ada", "ada@corp.io", team_id=eng.id)
        project = make_project("Apollo", team_ids=[eng.id])

        project_service.delete_project(db, project.id)

        assert db.get(Project, project.id) is None
        team = team_service.get_team(db, eng.id)
        assert (team.name, team.description, team.member_count, team.project_count) == (
            "Engineering", "core", 1, 0
        )

    def test_delete_missing_project(self, db):
        with pytest.raises(ResourceNotFoundError):
            project_service.delete_project(db, 6)
