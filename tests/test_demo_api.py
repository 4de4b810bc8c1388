class TestGetItems:
    def test_get_single_item(self, client):
        """Test the requested id is echoed back as a string."""
        response = client.get("/api/123")
        assert response.status_code == 200
        data = response.json()
        assert data["data"] == {"id": "123", "name": "Item 123"}
        assert data["message"] == "Retrieved item with ID: 123"
        assert data["method"] == "GET"
        assert data["endpoint"] == "/api"
        assert data["timestamp"]

    def test_get_all_items(self, client):
        response = client.get("/api")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Retrieved all items"
        assert data["data"] == [
            {"id": 1, "name": "Item 1"},
            {"id": 2, "name": "Item 2"},
            {"id": 3, "name": "Item 3"},
        ]


class TestCreateItem:
    def test_create_item_merges_body(self, client):
        response = client.post("/api", json={"name": "Widget", "price": 9.5})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Created new item"
        assert data["data"]["name"] == "Widget"
        assert data["data"]["price"] == 9.5
        assert isinstance(data["data"]["id"], int)

    def test_create_item_ids_are_distinct(self, client):
        """Test each POST gets its own time-based id."""
        first = client.post("/api", json={}).json()["data"]["id"]
        second = client.post("/api", json={}).json()["data"]["id"]
        assert isinstance(first, int)
        assert isinstance(second, int)
        assert first != second

    def test_create_item_malformed_body(self, client):
        """Test a body that is not JSON is treated as empty."""
        response = client.post(
            "/api", content="{not json", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert list(data) == ["id"]
        assert isinstance(data["id"], int)

    def test_create_item_body_id_wins(self, client):
        data = client.post("/api", json={"id": 42, "name": "Fixed"}).json()["data"]
        assert data == {"id": 42, "name": "Fixed"}


class TestUpdateItem:
    def test_update_item_with_id(self, client):
        response = client.put("/api/7", json={"name": "Renamed"})
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Updated item with ID: 7"
        assert data["data"] == {"id": "7", "name": "Renamed"}

    def test_update_item_without_id(self, client):
        data = client.put("/api", json={"name": "Anonymous"}).json()
        assert data["message"] == "Updated item"
        assert isinstance(data["data"]["id"], int)
        assert data["data"]["name"] == "Anonymous"

    def test_update_item_non_object_body(self, client):
        data = client.put("/api/7", json=[1, 2, 3]).json()
        assert data["data"] == {"id": "7"}


class TestDeleteItem:
    def test_delete_item_with_id(self, client):
        response = client.delete("/api/5")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Deleted item with ID: 5"
        assert data["data"] == {"deleted": True, "id": "5"}

    def test_delete_without_id(self, client):
        data = client.delete("/api").json()
        assert data["message"] == "Delete operation"
        assert data["data"]["deleted"] is True
        assert data["data"]["id"] is None

    def test_delete_does_not_remove_anything(self, client):
        """Test items are still listed after a delete; there is no store."""
        client.delete("/api/1")
        items = client.get("/api").json()["data"]
        assert {"id": 1, "name": "Item 1"} in items
