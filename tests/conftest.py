import os
import shutil
import tempfile
from pathlib import Path
from uuid import uuid4

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

TEST_DB_PATH = Path(tempfile.gettempdir()) / f"profile_hub_test_{os.getpid()}.db"
DEFAULT_TEST_DB_URL = f"sqlite:///{TEST_DB_PATH}"
TEST_DB_URL = os.getenv("TEST_DB_URL", DEFAULT_TEST_DB_URL)
os.environ["DATABASE_URL"] = TEST_DB_URL
TEST_UPLOAD_DIR = Path(tempfile.mkdtemp(prefix="profile_hub_uploads_"))
os.environ["UPLOAD_DIR"] = str(TEST_UPLOAD_DIR)

from fastapi.testclient import TestClient

from profile_hub.client.api_client import ProfileApiClient
from profile_hub.core.config import settings
from profile_hub.db.init_db import init_db
from profile_hub.main import app

settings.DATABASE_URL = TEST_DB_URL

TEST_PASSWORD = "secret123"


class TestClientAdapter(BaseAdapter):
    """Hands requests made through a ``requests.Session`` to the in-process app."""

    _dropped_headers = {"content-length", "connection"}

    def __init__(self, client: TestClient) -> None:
        super().__init__()
        self.client = client

    def send(self, request, stream=False, timeout=None, verify=True, cert=None, proxies=None):
        headers = {
            key: value
            for key, value in request.headers.items()
            if key.lower() not in self._dropped_headers
        }
        upstream = self.client.request(request.method, request.url, content=request.body, headers=headers)
        response = requests.Response()
        response.status_code = upstream.status_code
        response.reason = upstream.reason_phrase
        response.headers = CaseInsensitiveDict(upstream.headers)
        response._content = upstream.content
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    def close(self) -> None:
        pass


@pytest.fixture(autouse=True, scope="session")
def _configure_test_database():
    init_db(drop_all=True)
    yield
    if TEST_DB_URL == DEFAULT_TEST_DB_URL:
        TEST_DB_PATH.unlink(missing_ok=True)
    shutil.rmtree(TEST_UPLOAD_DIR, ignore_errors=True)


@pytest.fixture()
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_api_client(client):
    def _make() -> ProfileApiClient:
        session = requests.Session()
        session.mount("http://testserver", TestClientAdapter(client))
        return ProfileApiClient(base_url="http://testserver/api", session=session)

    return _make


@pytest.fixture()
def api_client(make_api_client):
    return make_api_client()


def register(client: TestClient, email: str | None = None, password: str = TEST_PASSWORD) -> dict:
    email = email or f"{uuid4().hex[:12]}@b.com"
    response = client.post(
        "/api/auth/register",
        json={"firstName": "Ada", "lastName": "Lovelace", "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    data["email"] = email
    data["headers"] = {"Authorization": f"Bearer {data['token']}"}
    return data


@pytest.fixture()
def register_user(client):
    def _register(email: str | None = None, password: str = TEST_PASSWORD) -> dict:
        return register(client, email=email, password=password)

    return _register
