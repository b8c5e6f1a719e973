"""Integration tests for the HTTP endpoints using FastAPI TestClient."""

import pytest

BASE = "/api/v1/Person"


class TestInfoEndpoints:
    def test_v1_info(self, client):
        resp = client.get("/api/v1/Person/Info")
        assert resp.status_code == 200
        assert resp.text == "You are using PersonAPI Version 1!"

    def test_v2_info(self, client):
        resp = client.get("/api/v2/Person/Info")
        assert resp.status_code == 200
        assert resp.text == "You are using PersonAPI Version 2!"

    def test_unversioned_is_v1(self, client):
        assert client.get("/api/Person/Info").text == "You are using PersonAPI Version 1!"


class TestListEndpoints:
    def test_list_all(self, client):
        resp = client.get(BASE)
        assert resp.status_code == 200
        body = resp.json()
        assert [p["id"] for p in body] == [1, 2, 3, 4, 5]
        assert body[0] == {"id": 1, "name": "Margaret Thatcher", "likesChocolate": True}

    def test_chocolate_lovers(self, client):
        resp = client.get(f"{BASE}/ChocolateLovers")
        assert resp.status_code == 200
        assert [p["id"] for p in resp.json()] == [1, 2, 5]

    @pytest.mark.parametrize("version", ["v1", "v2"])
    def test_versions_share_data(self, client, version):
        resp = client.get(f"/api/{version}/Person/4")
        assert resp.json()["name"] == "J.K. Rowling"


class TestFilterEndpoint:
    def test_chocolate_and_cap(self, client):
        resp = client.get(f"{BASE}/Filter", params={"likesChocolate": "true", "maxResults": 2})
        assert resp.status_code == 200
        assert [p["id"] for p in resp.json()] == [1, 2]

    def test_name(self, client):
        resp = client.get(f"{BASE}/Filter", params={"name": "George Orwell"})
        assert resp.status_code == 200
        assert resp.json() == [{"id": 3, "name": "George Orwell", "likesChocolate": False}]

    def test_no_results(self, client):
        resp = client.get(
            f"{BASE}/Filter",
            params={"name": "J.K. Rowling", "likesChocolate": "true", "maxResults": 1},
        )
        assert resp.status_code == 404
        assert resp.json()["detail"] == "No people matched the provided filter."

    def test_no_filter(self, client):
        resp = client.get(f"{BASE}/Filter")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "No filter was provided."

    def test_zero_cap(self, client):
        assert client.get(f"{BASE}/Filter", params={"maxResults": 0}).status_code == 404

    def test_negative_cap_is_bad_request(self, client):
        assert client.get(f"{BASE}/Filter", params={"maxResults": -1}).status_code == 400

    def test_non_boolean_flag_is_bad_request(self, client):
        assert client.get(f"{BASE}/Filter", params={"likesChocolate": "maybe"}).status_code == 400

    def test_empty_name_counts_as_absent(self, client):
        resp = client.get(f"{BASE}/Filter?name=")
        assert resp.status_code == 400
        assert resp.json()["detail"] == "No filter was provided."
        resp = client.get(f"{BASE}/Filter?name=&likesChocolate=true")
        assert resp.status_code == 200
        assert [p["id"] for p in resp.json()] == [1, 2, 5]

    def test_parameter_names_ignore_case(self, client):
        resp = client.get(f"{BASE}/Filter?LikesChocolate=true&MaxResults=2")
        assert resp.status_code == 200
        assert [p["id"] for p in resp.json()] == [1, 2]
        resp = client.get(f"{BASE}/Filter?NAME=George%20Orwell")
        assert resp.status_code == 200
        assert [p["id"] for p in resp.json()] == [3]

    def test_parameter_value_keeps_its_case(self, client):
        assert client.get(f"{BASE}/Filter?Name=george%20orwell").status_code == 404


class TestGetPerson:
    def test_existing(self, client):
        resp = client.get(f"{BASE}/2")
        assert resp.status_code == 200
        assert resp.json()["name"] == "William Shakespeare"

    def test_missing(self, client):
        resp = client.get(f"{BASE}/6")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Person with ID #6 does not exist."

    def test_non_numeric_id(self, client):
        assert client.get(f"{BASE}/abc").status_code == 400


class TestCreatePerson:
    def test_create(self, client):
        resp = client.post(BASE, json={"id": 6, "name": "Mark Twain", "likesChocolate": False})
        assert resp.status_code == 201
        assert resp.json() == {"id": 6, "name": "Mark Twain", "likesChocolate": False}
        assert resp.headers["location"] == f"{BASE}/6"
        assert client.get(f"{BASE}/6").status_code == 200

    def test_create_without_id_and_flag(self, client):
        resp = client.post(BASE, json={"name": "Mark Twain"})
        assert resp.status_code == 201
        assert resp.json() == {"id": 6, "name": "Mark Twain", "likesChocolate": True}

    def test_invalid_name(self, client, store):
        resp = client.post(BASE, json={"id": 7, "name": "Inval1d N^ame", "likesChocolate": True})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Name 'Inval1d N^ame' is not valid."
        assert store.count() == 5

    def test_duplicate_id(self, client):
        resp = client.post(BASE, json={"id": 3, "name": "Mark Twain"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Person with ID #3 already exists."

    def test_missing_name(self, client):
        assert client.post(BASE, json={"id": 9}).status_code == 400


class TestPutPerson:
    def test_replace_existing(self, client):
        resp = client.put(f"{BASE}/2", json={"id": 2, "name": "Roald Dahl", "likesChocolate": False})
        assert resp.status_code == 204
        assert resp.content == b""
        assert client.get(f"{BASE}/2").json() == {"id": 2, "name": "Roald Dahl", "likesChocolate": False}

    def test_create_then_replace(self, client):
        payload = {"id": 8, "name": "Roald Dahl", "likesChocolate": False}
        resp = client.put(f"{BASE}/8", json=payload)
        assert resp.status_code == 201
        assert resp.json() == payload
        assert resp.headers["location"] == f"{BASE}/8"
        assert client.get(f"{BASE}/8").json() == payload
        assert client.put(f"{BASE}/8", json=payload).status_code == 204

    @pytest.mark.parametrize("path_id", [7, 1])
    def test_mismatched_ids(self, client, path_id):
        resp = client.put(f"{BASE}/{path_id}", json={"id": 8, "name": "Roald Dahl", "likesChocolate": False})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert f"(ID #{path_id})" in detail
        assert "(ID #8)" in detail

    def test_invalid_name(self, client):
        resp = client.put(f"{BASE}/7", json={"id": 8, "name": "Inval1d N^ame", "likesChocolate": True})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Name 'Inval1d N^ame' is not valid."

    def test_body_without_id(self, client):
        assert client.put(f"{BASE}/2", json={"name": "Roald Dahl"}).status_code == 400


class TestDeletePerson:
    def test_delete(self, client, store):
        resp = client.delete(f"{BASE}/3")
        assert resp.status_code == 204
        assert store.count() == 4
        assert client.get(f"{BASE}/3").status_code == 404

    def test_delete_missing(self, client, store):
        resp = client.delete(f"{BASE}/42")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Person with ID #42 does not exist."
        assert store.count() == 5
