from bson import ObjectId

from app.models.item import ITEMS

MUG = {"title": "Mug", "des": "Ceramic mug", "price": 9.99, "image": "mug.png"}


class TestCreateItem:
    def test_requires_authentication(self, client, db):
        response = client.post("/api/items", json=MUG)

        assert response.status_code == 401
        assert db[ITEMS].count_documents({}) == 0

    def test_create_item(self, client, auth_headers):
        response = client.post("/api/items", json=MUG, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        for field, value in MUG.items():
            assert body[field] == value
        assert ObjectId.is_valid(body["id"])
        assert body["created_at"]
        assert body["updated_at"]

    def test_strings_are_trimmed(self, client, auth_headers):
        response = client.post(
            "/api/items", json={**MUG, "title": "  Mug  "}, headers=auth_headers
        )

        assert response.json()["title"] == "Mug"

    def test_missing_field(self, client, auth_headers):
        payload = {k: v for k, v in MUG.items() if k != "image"}

        response = client.post("/api/items", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == "Validation failed"

    def test_blank_title(self, client, auth_headers):
        response = client.post("/api/items", json={**MUG, "title": "   "}, headers=auth_headers)

        assert response.status_code == 400

    def test_negative_price(self, client, auth_headers):
        response = client.post("/api/items", json={**MUG, "price": -1}, headers=auth_headers)

        assert response.status_code == 400

    def test_infinite_price(self, client, auth_headers, db):
        body = '{"title": "Mug", "des": "d", "price": Infinity, "image": "m.png"}'

        response = client.post(
            "/api/items",
            content=body,
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert db[ITEMS].count_documents({}) == 0

    def test_image_is_stored_as_sent(self, client, auth_headers):
        response = client.post(
            "/api/items", json={**MUG, "image": " mug.png "}, headers=auth_headers
        )

        assert response.status_code == 201
        assert response.json()["image"] == " mug.png "

    def test_blank_image(self, client, auth_headers):
        response = client.post("/api/items", json={**MUG, "image": "  "}, headers=auth_headers)

        assert response.status_code == 400


class TestReadItems:
    def test_list_is_newest_first(self, client, auth_headers):
        for title in ("first", "second", "third"):
            client.post("/api/items", json={**MUG, "title": title}, headers=auth_headers)

        response = client.get("/api/items")

        assert response.status_code == 200
        assert [i["title"] for i in response.json()] == ["third", "second", "first"]

    def test_list_is_public_and_empty_by_default(self, client):
        response = client.get("/api/items")

        assert response.status_code == 200
        assert response.json() == []

    def test_get_item(self, client, item):
        response = client.get(f"/api/items/{item['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == item["id"]
        assert body["title"] == "Mug"
        assert body["price"] == 9.99

    def test_get_missing_item(self, client):
        response = client.get(f"/api/items/{ObjectId()}")

        assert response.status_code == 404
        assert response.json() == {"message": "Item not found"}

    def test_get_malformed_id_is_not_found(self, client):
        response = client.get("/api/items/not-an-id")

        assert response.status_code == 404


class TestUpdateItem:
    def test_full_replace(self, client, auth_headers, item):
        update = {"title": "Big mug", "des": "Larger", "price": 12.5, "image": "big.png"}

        response = client.put(f"/api/items/{item['id']}", json=update, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        for field, value in update.items():
            assert body[field] == value
        assert body["id"] == item["id"]
        assert client.get(f"/api/items/{item['id']}").json()["title"] == "Big mug"

    def test_requires_authentication(self, client, item):
        response = client.put(f"/api/items/{item['id']}", json=MUG)

        assert response.status_code == 401

    def test_missing_item(self, client, auth_headers):
        response = client.put(f"/api/items/{ObjectId()}", json=MUG, headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Item not found"}


class TestDeleteItem:
    def test_delete_returns_last_content(self, client, auth_headers, item):
        response = client.delete(f"/api/items/{item['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["title"] == "Mug"
        assert client.get(f"/api/items/{item['id']}").status_code == 404

    def test_requires_authentication(self, client, item):
        response = client.delete(f"/api/items/{item['id']}")

        assert response.status_code == 401

    def test_missing_item(self, client, auth_headers):
        response = client.delete(f"/api/items/{ObjectId()}", headers=auth_headers)

        assert response.status_code == 404

    def test_any_user_may_mutate(self, client, item):
        other = client.post(
            "/api/register",
            json={"name": "Eve", "email": "eve@example.com", "password": "pw"},
        ).json()

        response = client.delete(
            f"/api/items/{item['id']}",
            headers={"Authorization": f"Bearer {other['token']}"},
        )

        assert response.status_code == 200
