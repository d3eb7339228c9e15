"""Tests for the note filter composer."""

import pytest
from bson import ObjectId

from noteful.repositories.note_filters import compose_note_filter, scoped_id_filter

USER = "333333333333333333333300"
FOLDER = "111111111111111111111100"
TAG = "222222222222222222222200"

OWNER = {"userId": ObjectId(USER)}


@pytest.mark.parametrize(
    "options, expected",
    [
        ({}, OWNER),
        ({"search_term": ""}, OWNER),
        ({"search_term": None, "folder_id": None, "tag_id": None}, OWNER),
        ({"search_term": "gaga"}, {"$and": [OWNER, {"title": {"$regex": "gaga"}}]}),
        ({"folder_id": FOLDER}, {"$and": [OWNER, {"folderId": ObjectId(FOLDER)}]}),
        ({"tag_id": TAG}, {"$and": [OWNER, {"tags": ObjectId(TAG)}]}),
        (
            {"search_term": "cats", "folder_id": FOLDER, "tag_id": TAG},
            {"$and": [
                OWNER,
                {"title": {"$regex": "cats"}},
                {"folderId": ObjectId(FOLDER)},
                {"tags": ObjectId(TAG)},
            ]},
        ),
        (
            {"search_term": "cats", "case_insensitive": True},
            {"$and": [OWNER, {"title": {"$regex": "cats", "$options": "i"}}]},
        ),
    ],
)
def test_compose_note_filter(options, expected):
    assert compose_note_filter(USER, **options) == expected


def test_owner_clause_always_first():
    filtro = compose_note_filter(USER, search_term="x", folder_id=FOLDER, tag_id=TAG)
    assert filtro["$and"][0] == OWNER


def test_search_term_is_escaped():
    filtro = compose_note_filter(USER, search_term="a.b*(c")
    assert filtro["$and"][1] == {"title": {"$regex": r"a\.b\*\(c"}}


def test_user_id_is_required():
    with pytest.raises(TypeError):
        compose_note_filter(search_term="x")  # type: ignore[call-arg]


def test_malformed_user_id_rejected():
    with pytest.raises(ValueError):
        compose_note_filter("not-a-user")


def test_scoped_id_filter_valid_id():
    assert scoped_id_filter(USER, FOLDER) == {"$and": [OWNER, {"_id": ObjectId(FOLDER)}]}


def test_scoped_id_filter_keeps_malformed_id_as_string():
    assert scoped_id_filter(USER, "DOESNOTEXIST") == {"$and": [OWNER, {"_id": "DOESNOTEXIST"}]}
