from tests.utils.api import ApiTestCase


class ColumnRoutesTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.create_project("P1", "Alpha")

    def test_list_is_in_board_order(self):
        response = self.get("/api/columns?project_id=P1")

        self.assertEqual(response.status_code, 200)
        columns = response.get_json()
        self.assertEqual(
            [c["name"] for c in columns], ["To Do", "In Progress", "Blocked", "Done"]
        )
        self.assertEqual([c["order_index"] for c in columns], [0, 1, 2, 3])
        self.assertTrue(all(c["is_default"] for c in columns))

    def test_list_without_filter_covers_all_projects(self):
        self.create_project("P2", "Beta")

        columns = self.get("/api/columns").get_json()

        self.assertEqual(len(columns), 8)
        self.assertEqual([c["order_index"] for c in columns], [0, 0, 1, 1, 2, 2, 3, 3])

    def test_custom_column_gets_next_id_and_position(self):
        response = self.post("/api/columns", {"project_id": "P1", "name": "Review"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["id"], "P1-COL5")
        column = self.get("/api/columns/P1-COL5").get_json()
        self.assertEqual(column["order_index"], 4)
        self.assertFalse(column["is_default"])

    def test_explicit_order_index_zero(self):
        response = self.post(
            "/api/columns", {"project_id": "P1", "name": "Inbox", "order_index": 0}
        )

        self.assertEqual(response.status_code, 200)
        column = self.get(f"/api/columns/{response.get_json()['id']}").get_json()
        self.assertEqual(column["order_index"], 0)

    def test_duplicate_column_id_is_a_conflict(self):
        response = self.post(
            "/api/columns", {"id": "P1-COL1", "project_id": "P1", "name": "Again"}
        )

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json(), {"error": "Column with this ID already exists"})

    def test_update_and_delete(self):
        renamed = self.put("/api/columns/P1-COL3", {"name": "Impeded", "order_index": 2})
        self.assertEqual(renamed.status_code, 200)
        column = self.get("/api/columns/P1-COL3").get_json()
        self.assertEqual(column["name"], "Impeded")
        self.assertTrue(column["is_default"])

        self.assertEqual(self.delete("/api/columns/P1-COL3").status_code, 200)
        self.assertEqual(len(self.get("/api/columns?project_id=P1").get_json()), 3)
        self.assertEqual(self.delete("/api/columns/P1-COL3").status_code, 404)

    def test_supplied_id_must_belong_to_the_project(self):
        response = self.post("/api/columns", {"id": "P2-COL1", "project_id": "P1", "name": "Stray"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Validation error")
        self.assertEqual(self.get("/api/columns/P2-COL1").status_code, 404)
        self.create_project("P2", "Beta")
        self.assertEqual(len(self.get("/api/columns?project_id=P2").get_json()), 4)

    def test_supplied_id_must_end_in_a_number(self):
        response = self.post("/api/columns", {"id": "P1-COLX", "project_id": "P1", "name": "Odd"})

        self.assertEqual(response.status_code, 400)

    def test_supplied_id_in_scheme_is_kept(self):
        response = self.post("/api/columns", {"id": "P1-COL9", "project_id": "P1", "name": "Later"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["id"], "P1-COL9")
        next_column = self.post("/api/columns", {"project_id": "P1", "name": "After"})
        self.assertEqual(next_column.get_json()["id"], "P1-COL10")

    def test_fractional_order_index_is_rejected(self):
        response = self.post(
            "/api/columns", {"project_id": "P1", "name": "Review", "order_index": 2.5}
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(len(self.get("/api/columns?project_id=P1").get_json()), 4)

    def test_update_requires_name_and_position(self):
        response = self.put("/api/columns/P1-COL1", {"name": "Backlog"})

        self.assertEqual(response.status_code, 400)
