import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from tripmate.api.routes import app
from tripmate.services.mongoDB import mongoDB
from tripmate.settings.config import settings


class FakeInsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeCollection:
    """Just enough of a pymongo collection for the users store"""

    def __init__(self):
        self.documents = []

    def _matches(self, document, query):
        for key, value in query.items():
            if key == "$or":
                if not any(self._matches(document, sub) for sub in value):
                    return False
            elif document.get(key) != value:
                return False
        return True

    def find_one(self, query, projection=None):
        for document in self.documents:
            if self._matches(document, query):
                found = dict(document)
                for field, include in (projection or {}).items():
                    if not include:
                        found.pop(field, None)
                return found
        return None

    def insert_one(self, document):
        for existing in self.documents:
            if existing["username"] == document["username"] or existing["email"] == document["email"]:
                raise DuplicateKeyError("E11000 duplicate key error")
        document.setdefault("_id", ObjectId())
        self.documents.append(dict(document))
        return FakeInsertResult(document["_id"])


class FakeLLM:
    """Stands in for GeminiClient.generate, replaying canned responses in order"""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def __call__(self, prompt, enable_search=None):
        self.calls.append({"prompt": prompt, "enable_search": enable_search})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def auth_settings(monkeypatch):
    monkeypatch.setattr(settings, "JWT_SECRET", "test-secret")
    monkeypatch.setattr(settings, "JWT_EXPIRES_HOURS", 5)
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)


@pytest.fixture
def users(monkeypatch):
    collection = FakeCollection()
    monkeypatch.setattr(mongoDB, "collection", collection)
    return collection


@pytest.fixture
def fake_llm(monkeypatch):
    def install(llm_client, *responses):
        fake = FakeLLM(responses)
        monkeypatch.setattr(llm_client, "generate", fake)
        monkeypatch.setattr(llm_client.config, "api_key", "test-key")
        return fake
    return install


@pytest.fixture
def client():
    return TestClient(app)
