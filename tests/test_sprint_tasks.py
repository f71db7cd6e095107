from sqlalchemy import func, select

from database import db
from models.sprint import sprint_tasks
from tests.utils.api import ApiTestCase


class SprintTaskAssociationTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.create_project("P1", "Alpha")
        self.create_task("T1")
        self.create_sprint("S1")

    def _association_count(self):
        with self.app.app_context():
            return db.session.execute(select(func.count()).select_from(sprint_tasks)).scalar()

    def test_associating_twice_keeps_one_row(self):
        first = self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})
        second = self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})

        self.assertEqual(first.status_code, 200)
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.get_json(), {"message": "Task added to sprint successfully"})
        self.assertEqual(self._association_count(), 1)
        self.assertEqual(self.get("/api/sprints/S1").get_json()["task_ids"], ["T1"])

    def test_task_can_join_several_sprints(self):
        self.create_sprint("S2", name="Sprint 2")

        self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})
        self.post("/api/tasks/T1/sprint", {"sprint_id": "S2"})

        self.assertEqual(self.get("/api/tasks/T1").get_json()["sprint_ids"], ["S1", "S2"])

    def test_sprint_id_is_required(self):
        response = self.post("/api/tasks/T1/sprint", {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json(), {"error": "Sprint ID is required"})

    def test_missing_task_or_sprint(self):
        missing_task = self.post("/api/tasks/T9/sprint", {"sprint_id": "S1"})
        missing_sprint = self.post("/api/tasks/T1/sprint", {"sprint_id": "S9"})

        self.assertEqual(missing_task.status_code, 404)
        self.assertEqual(missing_task.get_json(), {"error": "Task not found"})
        self.assertEqual(missing_sprint.status_code, 404)
        self.assertEqual(missing_sprint.get_json(), {"error": "Sprint not found"})
        self.assertEqual(self._association_count(), 0)

    def test_deleting_sprint_removes_links(self):
        self.post("/api/tasks/T1/sprint", {"sprint_id": "S1"})

        self.assertEqual(self.delete("/api/sprints/S1").status_code, 200)

        self.assertEqual(self._association_count(), 0)
        self.assertEqual(self.get("/api/tasks/T1").get_json()["sprint_ids"], [])
