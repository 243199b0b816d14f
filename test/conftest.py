"""
Shared fixtures: an in-memory MongoDB, a fake GitHub API and a TestClient
wired to both through FastAPI dependency overrides.
"""
from typing import Dict

import httpx
import mongomock
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from devconnect.api.v1.dependencies import get_profile_service
from devconnect.application.services.profile_service import ProfileService
from devconnect.core.security import create_access_token
from devconnect.infrastructure.db.mongo_post_repository import MongoPostRepository
from devconnect.infrastructure.db.mongo_profile_repository import MongoProfileRepository
from devconnect.infrastructure.db.mongo_user_repository import MongoUserRepository
from devconnect.infrastructure.github.github_client import GitHubClient
from devconnect.main import create_application

GITHUB_API = "https://api.github.test"
GITHUB_AVATAR = "http://avatars.githubusercontent.com/u/583231?v=4"


def github_handler(request: httpx.Request) -> httpx.Response:
    """Fake GitHub: knows a single user, 'octocat', with seven repositories."""
    path = request.url.path
    if path == "/users/octocat":
        return httpx.Response(200, json={"login": "octocat", "avatar_url": GITHUB_AVATAR})
    if path == "/users/octocat/repos":
        per_page = int(request.url.params.get("per_page", "30"))
        repos = [{"name": f"repo-{i}", "id": i} for i in range(7, 0, -1)]
        return httpx.Response(200, json=repos[:per_page])
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
def github_requests():
    """Every request the fake GitHub API receives."""
    return []


@pytest.fixture
def github_client(github_requests) -> GitHubClient:
    def handler(request: httpx.Request) -> httpx.Response:
        github_requests.append(request)
        return github_handler(request)

    return GitHubClient(
        token="test-token",
        base_url=GITHUB_API,
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


@pytest.fixture
def database():
    return mongomock.MongoClient().db


@pytest.fixture
def profile_repository(database) -> MongoProfileRepository:
    return MongoProfileRepository(database)


@pytest.fixture
def user_repository(database) -> MongoUserRepository:
    return MongoUserRepository(database)


@pytest.fixture
def post_repository(database) -> MongoPostRepository:
    return MongoPostRepository(database)


@pytest.fixture
def service(profile_repository, user_repository, post_repository, github_client) -> ProfileService:
    return ProfileService(
        profile_repository=profile_repository,
        user_repository=user_repository,
        post_repository=post_repository,
        github_client=github_client,
    )


@pytest.fixture
def user(database) -> Dict:
    """A stored user document."""
    doc = {
        "_id": ObjectId(),
        "name": "Ada Lovelace",
        "email": "  Ada@Example.com ",
        "avatar": None,
    }
    database.users.insert_one(doc)
    return doc


@pytest.fixture
def other_user(database) -> Dict:
    doc = {
        "_id": ObjectId(),
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "avatar": None,
    }
    database.users.insert_one(doc)
    return doc


@pytest.fixture
def user_id(user) -> str:
    return str(user["_id"])


@pytest.fixture
def auth_headers(user_id) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def app(service):
    application = create_application()
    application.dependency_overrides[get_profile_service] = lambda: service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def profile_payload() -> Dict:
    return {
        "status": "Developer",
        "skills": "Python, FastAPI , ,MongoDB",
        "company": "Analytical Engines",
        "website": "www.Example.com/",
        "location": "London",
        "bio": "First programmer",
        "githubusername": "octocat",
        "twitter": "twitter.com/ada",
        "linkedin": "",
    }
