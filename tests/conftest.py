"""Shared test fixtures: in-memory Mongo, seed data, authenticated client."""

from __future__ import annotations

import os
from datetime import datetime, timedelta, timezone

os.environ.setdefault("JWT_SECRET", "noteful-test-secret-0123456789abcdef")

import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from noteful.infrastructure.db import mongo
from noteful.infrastructure.db.bootstrap import ensure_collections
from noteful.main import app
from noteful.services.token_service import create_access_token
from noteful.services.user_service import hash_password

ALICE_ID = "333333333333333333333300"
BOB_ID = "333333333333333333333301"

FOLDER_ARCHIVE = "111111111111111111111100"
FOLDER_DRAFTS = "111111111111111111111101"
FOLDER_BOB = "111111111111111111111102"

TAG_BREED = "222222222222222222222200"
TAG_HOT = "222222222222222222222201"
TAG_BOB = "222222222222222222222202"

NOTE_LESSONS = "000000000000000000000000"
NOTE_GOVERNMENT = "000000000000000000000001"
NOTE_BORING = "000000000000000000000002"
NOTE_GAGA = "000000000000000000000003"
NOTE_BOB_CATS = "000000000000000000000004"
NOTE_BOB_GAGA = "000000000000000000000005"

PASSWORD = "password123"


@pytest.fixture(scope="session")
def password_hash():
    return hash_password(PASSWORD)


@pytest.fixture
def db():
    """Fresh in-memory database wired into the repositories."""
    database = mongomock.MongoClient()["noteful_test"]
    mongo.use_database(database)
    ensure_collections()
    yield database
    mongo.use_database(None)


def _ts(minutes: int) -> datetime:
    return datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes)


def _note(note_id, owner, title, content, folder=None, tags=(), minutes=0):
    doc = {
        "_id": ObjectId(note_id),
        "userId": ObjectId(owner),
        "title": title,
        "content": content,
        "tags": [ObjectId(t) for t in tags],
        "createdAt": _ts(minutes),
        "updatedAt": _ts(minutes),
    }
    if folder:
        doc["folderId"] = ObjectId(folder)
    return doc


def _named(doc_id, owner, name):
    return {
        "_id": ObjectId(doc_id),
        "userId": ObjectId(owner),
        "name": name,
        "createdAt": _ts(0),
        "updatedAt": _ts(0),
    }


@pytest.fixture
def seed(db, password_hash):
    db["user"].insert_many([
        {"_id": ObjectId(ALICE_ID), "username": "alice", "fullname": "Alice Doe", "password": password_hash},
        {"_id": ObjectId(BOB_ID), "username": "bob", "fullname": "Bob Roe", "password": password_hash},
    ])
    db["folder"].insert_many([
        _named(FOLDER_ARCHIVE, ALICE_ID, "Archive"),
        _named(FOLDER_DRAFTS, ALICE_ID, "Drafts"),
        _named(FOLDER_BOB, BOB_ID, "Personal"),
    ])
    db["tag"].insert_many([
        _named(TAG_BREED, ALICE_ID, "breed"),
        _named(TAG_HOT, ALICE_ID, "hot"),
        _named(TAG_BOB, BOB_ID, "misc"),
    ])
    db["note"].insert_many([
        _note(NOTE_LESSONS, ALICE_ID, "5 life lessons learned from cats", "Lorem ipsum one",
              folder=FOLDER_ARCHIVE, tags=[TAG_BREED], minutes=1),
        _note(NOTE_GOVERNMENT, ALICE_ID, "What the government doesn't want you to know about cats",
              "Lorem ipsum two", folder=FOLDER_ARCHIVE, tags=[TAG_BREED, TAG_HOT], minutes=2),
        _note(NOTE_BORING, ALICE_ID, "The most boring article about cats you'll ever read",
              "Lorem ipsum three", folder=FOLDER_DRAFTS, minutes=3),
        _note(NOTE_GAGA, ALICE_ID, "7 things lady gaga has in common with cats", "Lorem ipsum four",
              tags=[TAG_HOT], minutes=4),
        _note(NOTE_BOB_CATS, BOB_ID, "10 ways cats can help you live to 100", "Bob content",
              folder=FOLDER_BOB, tags=[TAG_BOB], minutes=5),
        _note(NOTE_BOB_GAGA, BOB_ID, "Why lady gaga is not a cat", "Bob content two", minutes=6),
    ])
    return db


@pytest.fixture
def token():
    return create_access_token(user_id=ALICE_ID, username="alice")


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def auth(token):
    return {"Authorization": f"Bearer {token}"}
