# conftest.py
import mongomock
import pytest
from fastapi.testclient import TestClient

from carecrew.db import ensure_indexes, get_request_collection, get_volunteer_collection
from carecrew.main import app
from carecrew.utils import create_access_token

ORGANIZER = "organizer@example.com"
VOLUNTEER = "volunteer@example.com"


@pytest.fixture
def mongo():
    db = mongomock.MongoClient()["careCrew"]
    ensure_indexes(db["requests"])
    return db


@pytest.fixture
def volunteers(mongo):
    return mongo["volunteers"]


@pytest.fixture
def requests(mongo):
    return mongo["requests"]


@pytest.fixture
def client(volunteers, requests):
    app.dependency_overrides[get_volunteer_collection] = lambda: volunteers
    app.dependency_overrides[get_request_collection] = lambda: requests
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(email: str, **claims) -> dict:
    """Cookie header carrying a credential for email."""
    token = create_access_token({"email": email, **claims})
    return {"Cookie": f"token={token}"}


@pytest.fixture
def make_post(volunteers):
    def _make_post(needed=3, title="Beach Cleanup", category="Environment", organizer=ORGANIZER):
        result = volunteers.insert_one({
            "postTitle": title,
            "category": category,
            "organizer": {"email": organizer, "name": "Org"},
            "volunteersNeeded": needed,
        })
        return str(result.inserted_id)
    return _make_post


def request_body(post_id: str, email: str = VOLUNTEER, **extra) -> dict:
    return {"postId": post_id, "volunteer": {"email": email, "name": "Vol"}, **extra}
