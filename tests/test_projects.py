from unittest.mock import patch

from sqlalchemy import func, select

from database import db
from models.kanban_column import KanbanColumn
from models.project import Project
from models.task import Task
from services.project_service import default_columns
from tests.utils.api import ApiTestCase


class ProjectCreationTestCase(ApiTestCase):
    def _column_rows(self, project_id):
        with self.app.app_context():
            columns = (
                KanbanColumn.query.filter_by(project_id=project_id)
                .order_by(KanbanColumn.order_index)
                .all()
            )
            return [(c.id, c.name, c.order_index, c.is_default) for c in columns]

    def _project_exists(self, project_id):
        with self.app.app_context():
            return db.session.get(Project, project_id) is not None

    def test_create_bootstraps_default_columns(self):
        response = self.create_project("P1", "Alpha")

        self.assertEqual(
            response.get_json(), {"message": "Project created successfully", "id": "P1"}
        )
        self.assertEqual(
            self._column_rows("P1"),
            [
                ("P1-COL1", "To Do", 0, True),
                ("P1-COL2", "In Progress", 1, True),
                ("P1-COL3", "Blocked", 2, True),
                ("P1-COL4", "Done", 3, True),
            ],
        )

    def test_defaults_are_applied(self):
        self.create_project("P1", "Alpha")

        project = self.get("/api/projects/P1").get_json()

        self.assertEqual(project["status"], "active")
        self.assertEqual(project["description"], "")

    def test_required_fields(self):
        for payload in ({"name": "Alpha"}, {"id": "P1"}, {"id": "  ", "name": "Alpha"}):
            response = self.post("/api/projects", payload)
            self.assertEqual(response.status_code, 400)
            self.assertEqual(response.get_json()["error"], "Validation error")
        self.assertFalse(self._project_exists("P1"))

    def test_duplicate_id_is_a_conflict(self):
        self.create_project("P1", "Alpha")

        response = self.post("/api/projects", {"id": "P1", "name": "Again"})

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json(), {"error": "Project with this ID already exists"})
        self.assertEqual(len(self._column_rows("P1")), 4)
        self.assertEqual(self.get("/api/projects/P1").get_json()["name"], "Alpha")

    def test_failed_column_insert_rolls_back_project(self):
        def broken_columns(project_id):
            columns = default_columns(project_id)
            columns[-1].project_id = "P404"
            return columns

        with patch("services.project_service.default_columns", side_effect=broken_columns):
            response = self.post("/api/projects", {"id": "P1", "name": "Alpha"})

        self.assertEqual(response.status_code, 500)
        body = response.get_json()
        self.assertEqual(body["error"], "Failed to create project")
        self.assertIn("details", body)
        self.assertFalse(self._project_exists("P1"))
        self.assertEqual(self._column_rows("P1"), [])
        self.assertEqual(self._column_rows("P404"), [])


class ProjectReadTestCase(ApiTestCase):
    def test_scenario_counts_follow_children(self):
        self.create_project("P1", "Alpha")

        project = self.get("/api/projects/P1").get_json()
        self.assertEqual(project["status"], "active")
        self.assertEqual(project["sprint_count"], 0)
        self.assertEqual(project["task_count"], 0)

        self.create_task("T1", project_id="P1")
        self.assertEqual(self.get("/api/projects/P1").get_json()["task_count"], 1)

        self.create_sprint("S1", project_id="P1")
        first = self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})
        again = self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})
        self.assertEqual(first.status_code, 200)
        self.assertEqual(again.status_code, 200)

        project = self.get("/api/projects/P1").get_json()
        self.assertEqual(project["sprint_count"], 1)
        self.assertEqual(project["task_count"], 1)
        self.assertEqual(self.get("/api/tasks/T1").get_json()["sprint_ids"], ["S1"])

    def test_list_includes_counts_newest_first(self):
        self.create_project("P1", "Alpha")
        self.create_project("P2", "Beta")
        self.create_task("T1", project_id="P2")
        self.create_task("T2", project_id="P2")
        self.post(
            "/api/risks", {"id": "R1", "project_id": "P2", "name": "Vendor delay"}
        )

        response = self.get("/api/projects")

        self.assertEqual(response.status_code, 200)
        projects = response.get_json()
        self.assertEqual([p["id"] for p in projects], ["P2", "P1"])
        self.assertEqual(
            (projects[0]["task_count"], projects[0]["sprint_count"], projects[0]["risk_count"]),
            (2, 0, 1),
        )
        self.assertEqual(projects[1]["task_count"], 0)

    def test_missing_project(self):
        response = self.get("/api/projects/P404")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.get_json(), {"error": "Project not found"})


class ProjectUpdateDeleteTestCase(ApiTestCase):
    def test_update_overwrites_fields(self):
        self.create_project("P1", "Alpha", description="First", status="active")

        response = self.put("/api/projects/P1", {"name": "Alpha v2", "status": "closed"})

        self.assertEqual(response.status_code, 200)
        project = self.get("/api/projects/P1").get_json()
        self.assertEqual(project["name"], "Alpha v2")
        self.assertEqual(project["status"], "closed")
        self.assertEqual(project["description"], "")

    def test_update_missing_project_changes_nothing(self):
        self.create_project("P1", "Alpha")

        response = self.put("/api/projects/P404", {"name": "Ghost"})

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.get("/api/projects/P1").get_json()["name"], "Alpha")

    def test_update_requires_name(self):
        self.create_project("P1", "Alpha")

        response = self.put("/api/projects/P1", {"status": "closed"})

        self.assertEqual(response.status_code, 400)

    def test_delete_cascades_to_children(self):
        self.create_project("P1", "Alpha")
        self.create_project("P2", "Beta")
        self.create_task("T1", project_id="P1")
        self.create_task("T2", project_id="P2")
        self.create_sprint("S1", project_id="P1")
        self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})

        response = self.delete("/api/projects/P1")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"message": "Project deleted successfully"})
        self.assertEqual(self.get("/api/projects/P1").status_code, 404)
        with self.app.app_context():
            self.assertIsNone(db.session.get(Task, "T1"))
            self.assertIsNotNone(db.session.get(Task, "T2"))
            remaining_columns = db.session.execute(
                select(KanbanColumn.project_id, func.count()).group_by(KanbanColumn.project_id)
            ).all()
            self.assertEqual([tuple(row) for row in remaining_columns], [("P2", 4)])

    def test_delete_missing_project(self):
        self.create_project("P1", "Alpha")

        response = self.delete("/api/projects/P404")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(len(self.get("/api/projects").get_json()), 1)
