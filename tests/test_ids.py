"""Tests for noteful.core.ids."""

import pytest
from bson import ObjectId

from noteful.core.ids import id_str, is_valid_id, to_object_id


@pytest.mark.parametrize(
    "candidate",
    [
        "000000000000000000000000",
        "AAAAAAAAAAAAAAAAAAAAAAAA",
        "5f1a2b3c4d5e6f7a8b9c0d1e",
        str(ObjectId()),
    ],
)
def test_valid_ids(candidate):
    assert is_valid_id(candidate) is True


@pytest.mark.parametrize(
    "candidate",
    [
        "INVALID",
        "DOESNOTEXIST",
        "",
        "00000000000000000000000",  # 23
        "0000000000000000000000000",  # 25
        "zzzzzzzzzzzzzzzzzzzzzzzz",
        " 000000000000000000000000",
        "000000000000000000000000\n",
        "abcdefghijkl",  # 12 chars, ObjectId bytes length
        None,
        12345,
        ObjectId(),
    ],
)
def test_invalid_ids(candidate):
    assert is_valid_id(candidate) is False


def test_to_object_id_rejects_malformed():
    with pytest.raises(ValueError):
        to_object_id("INVALID")


def test_to_object_id_and_back():
    oid = to_object_id("5f1a2b3c4d5e6f7a8b9c0d1e")
    assert isinstance(oid, ObjectId)
    assert id_str(oid) == "5f1a2b3c4d5e6f7a8b9c0d1e"
    assert id_str(None) is None
