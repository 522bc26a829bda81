from datetime import UTC, datetime
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tests.conftest import RepoFactory
from vgit.config import Config
from vgit.server import create_app
from vgit.utils import create_null_logger


@pytest.fixture
def client(make_repo: RepoFactory, repos_root: Path) -> TestClient:
    make_repo(
        "project",
        {"README.md": "# Hello\n", "docs/guide.md": "Guide\n"},
        date=datetime(2024, 6, 1, tzinfo=UTC),
        description="Demo project",
    )
    config = Config.from_dict({"browser": {"root": str(repos_root)}})
    return TestClient(create_app(config, logger=create_null_logger()))


def test_index_lists_repository(client: TestClient) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert "Demo project" in response.text


def test_browse_flow(client: TestClient) -> None:
    root = client.get("/project")
    assert root.status_code == 200
    assert 'href="/project/tree/master/docs"' in root.text
    assert "<h1>Hello</h1>" in root.text

    tree = client.get("/project/tree/master/docs")
    assert 'href="/project/blob/master/docs/guide.md"' in tree.text

    blob = client.get("/project/blob/master/docs/guide.md")
    assert "Guide" in blob.text

    raw = client.get("/project/raw/master/docs/guide.md")
    assert raw.content == b"Guide\n"


def test_redirects_and_not_found(client: TestClient) -> None:
    redirect = client.get("/project/blob/master/docs", follow_redirects=False)
    assert redirect.status_code == 302
    assert redirect.headers["location"] == "/project/tree/master/docs"

    assert client.get("/project/tree/master/missing").status_code == 404
    assert client.get("/nothing").status_code == 404


def test_api_repositories(client: TestClient) -> None:
    response = client.get("/api/repositories")

    assert response.json()["repositories"][0]["name"] == "project"
