"""
Test configuration and fixtures

- Settings pinned for tests (no image host, short-lived tokens)
- In-memory Mongo through mongomock-motor, one fresh client per test
- Image uploader replaced with a recording fake
- Helpers to register and log in users through the API
"""

from collections.abc import Callable, Generator

from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient
import pytest

from eventra.config import Settings
from eventra.exceptions import ImageUploadError
from eventra.main import create_app
from eventra.utils.image_upload import get_image_uploader
from tests.constants import DEFAULT_PASSWORD, HOSTED_IMAGE_URL


class FakeUploader:
    def __init__(self):
        self.uploads: list[tuple[str, bytes]] = []
        self.fail = False

    async def upload(self, data: bytes, filename: str = 'image') -> str:
        if self.fail:
            raise ImageUploadError('image host unavailable')
        self.uploads.append((filename, data))
        return HOSTED_IMAGE_URL


@pytest.fixture
def settings() -> Settings:
    return Settings(
        mongo_db='eventra_test',
        jwt_secret='test-secret',
        access_token_expire_minutes=30,
        cors_origins=['http://testserver'],
    )


@pytest.fixture
def mongo_client() -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest.fixture
def fake_uploader() -> FakeUploader:
    return FakeUploader()


@pytest.fixture
def client(settings, mongo_client, fake_uploader) -> Generator[TestClient, None, None]:
    app = create_app(settings, mongo_client=mongo_client)
    app.dependency_overrides[get_image_uploader] = lambda: fake_uploader
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client) -> Callable[..., dict]:
    def _register(name: str = 'A', email: str = 'a@x.com', password: str = DEFAULT_PASSWORD) -> dict:
        response = client.post('/register', json={'name': name, 'email': email, 'password': password})
        assert response.status_code == 200, response.text
        return response.json()

    return _register


@pytest.fixture
def login(client) -> Callable[..., dict]:
    def _login(email: str = 'a@x.com', password: str = DEFAULT_PASSWORD) -> dict:
        response = client.post('/login', json={'email': email, 'password': password})
        assert response.status_code == 200, response.text
        return response.json()

    return _login


@pytest.fixture
def event_form() -> dict:
    return {
        'title': 'Jazz Night',
        'owner': 'A',
        'description': 'Live quartet',
        'organizedBy': 'Blue Room',
        'eventDate': '2026-11-20',
        'eventTime': '20:00',
        'location': 'Main Hall',
        'ticketPrice': '25.5',
    }
