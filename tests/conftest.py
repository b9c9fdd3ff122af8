"""
Pytest fixtures.

Environment variables are set BEFORE importing careerion so the cached
Settings pick them up. MongoDB is replaced by mongomock and Gemini by
FakeGateway, both through app.dependency_overrides.
"""

import os
from datetime import datetime

os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET"] = "test-secret-key-1234"
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["GEMINI_MODEL"] = "models/gemini-test"
os.environ["SEED_SAMPLE_DATA"] = "false"

import mongomock
import pytest
from fastapi.testclient import TestClient

from careerion.core.auth import hash_password
from careerion.db.mongodb import get_database, init_mongo_indexes
from careerion.main import app
from careerion.services.gemini_client import get_ai_gateway


class FakeGateway:
    """Records every call; replies with a fixed text or raises on demand."""

    model_name = "gemini-test"

    def __init__(self, reply="Here is some career advice.", generate_error=None, chat_error=None):
        self.reply = reply
        self.generate_error = generate_error
        self.chat_error = chat_error
        self.generate_calls = []
        self.chat_calls = []

    def generate(self, prompt):
        self.generate_calls.append(prompt)
        if self.generate_error:
            raise self.generate_error
        return self.reply

    def chat(self, history, prompt):
        self.chat_calls.append((history, prompt))
        if self.chat_error:
            raise self.chat_error
        return self.reply


@pytest.fixture
def db():
    database = mongomock.MongoClient().careerion_test
    init_mongo_indexes(database)
    return database


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(db, gateway):
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_ai_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def signup(client):
    """Sign up a user and return the response body."""
    def _signup(name="Test User", email="test@example.com", password="password123"):
        response = client.post("/api/auth/signup", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()
    return _signup


@pytest.fixture
def user_token(signup):
    return signup(name="Regular User", email="user@test.com")["token"]


def auth_header(token):
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(db, client):
    """
    Insert a user with the given role straight into the store and log in.
    Returns (token, user_id).
    """
    def _make(email, role="user", password="password123", name=None, is_active=True):
        result = db.users.insert_one({
            "name": name or email.split("@")[0],
            "email": email,
            "password": hash_password(password),
            "profile": {},
            "profileComplete": False,
            "role": role,
            "isActive": is_active,
            "createdAt": datetime.utcnow(),
        })
        response = client.post("/api/auth/login", json={"email": email, "password": password})
        token = response.json().get("token")
        return token, str(result.inserted_id)
    return _make
