from unittest.mock import patch

from pymongo.errors import ServerSelectionTimeoutError


class TestErrorRendering:
    def test_root_greeting(self, client):
        response = client.get("/api")

        assert response.status_code == 200
        assert response.text == "Hello Ecom API 🚀"

    def test_unknown_route_uses_message_body(self, client):
        response = client.get("/api/nope")

        assert response.status_code == 404
        assert "message" in response.json()

    def test_store_failure_hides_driver_message(self, client):
        with patch(
            "app.repositories.item_repo.ItemRepository.list",
            side_effect=ServerSelectionTimeoutError("db-host-7:27017 timed out"),
        ):
            response = client.get("/api/items")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}
        assert "db-host-7" not in response.text

    def test_malformed_json_body_is_bad_request(self, client, auth_headers):
        response = client.post(
            "/api/items",
            content="{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
