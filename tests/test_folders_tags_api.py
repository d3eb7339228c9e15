"""HTTP tests for /api/folders and /api/tags."""

import pytest
from bson import ObjectId

from conftest import ALICE_ID, FOLDER_ARCHIVE, FOLDER_BOB, NOTE_GOVERNMENT, NOTE_LESSONS, TAG_BOB, TAG_HOT

NAMED_KEYS = {"id", "userId", "name", "createdAt", "updatedAt"}


@pytest.mark.parametrize("resource", ["folders", "tags"])
class TestNamedResources:
    def test_list_sorted_and_scoped(self, client, auth, seed, resource):
        res = client.get(f"/api/{resource}", headers=auth)
        assert res.status_code == 200
        body = res.json()
        assert len(body) == 2
        assert [item["name"] for item in body] == sorted(item["name"] for item in body)
        for item in body:
            assert set(item) == NAMED_KEYS
            assert item["userId"] == ALICE_ID

    def test_get_invalid_and_absent(self, client, auth, seed, resource):
        res = client.get(f"/api/{resource}/INVALID", headers=auth)
        assert res.status_code == 400
        assert res.json()["message"] == "The id is not valid"
        assert client.get(f"/api/{resource}/AAAAAAAAAAAAAAAAAAAAAAAA", headers=auth).status_code == 404

    def test_create_update_delete(self, client, auth, seed, resource):
        res = client.post(f"/api/{resource}", json={"name": "  Fresh  "}, headers=auth)
        assert res.status_code == 201
        created = res.json()
        assert created["name"] == "Fresh"
        assert res.headers["location"].endswith(f"/api/{resource}/{created['id']}")

        res = client.put(f"/api/{resource}/{created['id']}", json={"name": "Renamed"}, headers=auth)
        assert res.status_code == 200
        assert res.json()["name"] == "Renamed"

        assert client.delete(f"/api/{resource}/{created['id']}", headers=auth).status_code == 204
        assert client.delete(f"/api/{resource}/{created['id']}", headers=auth).status_code == 204
        assert client.get(f"/api/{resource}/{created['id']}", headers=auth).status_code == 404

    def test_missing_name(self, client, auth, seed, resource):
        res = client.post(f"/api/{resource}", json={}, headers=auth)
        assert res.status_code == 400
        assert res.json()["message"] == "Missing name in request body"

    def test_duplicate_name(self, client, auth, seed, resource):
        existing = client.get(f"/api/{resource}", headers=auth).json()[0]["name"]
        res = client.post(f"/api/{resource}", json={"name": existing}, headers=auth)
        assert res.status_code == 400
        singular = resource[:-1]
        assert res.json()["message"] == f"The {singular} name already exists"

    def test_same_name_allowed_for_other_user(self, client, auth, seed, resource):
        other = "Personal" if resource == "folders" else "misc"
        res = client.post(f"/api/{resource}", json={"name": other}, headers=auth)
        assert res.status_code == 201


def test_cannot_touch_other_users_folder(client, auth, seed):
    assert client.get(f"/api/folders/{FOLDER_BOB}", headers=auth).status_code == 404
    assert client.put(f"/api/folders/{FOLDER_BOB}", json={"name": "x"}, headers=auth).status_code == 404
    assert client.delete(f"/api/folders/{FOLDER_BOB}", headers=auth).status_code == 204
    assert seed["folder"].count_documents({"_id": ObjectId(FOLDER_BOB)}) == 1


def test_delete_folder_detaches_notes(client, auth, seed):
    assert client.delete(f"/api/folders/{FOLDER_ARCHIVE}", headers=auth).status_code == 204
    note = client.get(f"/api/notes/{NOTE_LESSONS}", headers=auth).json()
    assert note["folderId"] is None
    assert client.get("/api/notes", params={"folderId": FOLDER_ARCHIVE}, headers=auth).json() == []


def test_delete_tag_pulls_it_from_notes(client, auth, seed):
    assert client.delete(f"/api/tags/{TAG_HOT}", headers=auth).status_code == 204
    note = client.get(f"/api/notes/{NOTE_GOVERNMENT}", headers=auth).json()
    assert TAG_HOT not in note["tags"]
    assert len(note["tags"]) == 1


def test_note_with_foreign_tag_rejected(client, auth, seed):
    res = client.post("/api/notes", json={"title": "t", "tags": [TAG_BOB]}, headers=auth)
    assert res.status_code == 400
    assert res.json()["message"] == "The tags array contains an invalid id"
