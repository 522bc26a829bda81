# pyright: reportAny=false
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from vgit.browse import RepositoryBrowser
from vgit.config import Config
from vgit.exceptions import RepositoryError, RepositoryNotFoundError, RepositoryOpenError
from vgit.repository import FakeRepository, RepositoryProtocol
from vgit.server import HEALTH_PATH, create_app
from vgit.utils import create_null_logger

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture
def browser(tmp_path: Path, fake_repo: FakeRepository) -> RepositoryBrowser:
    (tmp_path / "project").mkdir()
    (tmp_path / "broken").mkdir()

    def opener(path: Path) -> RepositoryProtocol:
        if path.name == "project":
            return fake_repo
        msg = f"Not a git repository: {path}"
        raise RepositoryOpenError(msg, path=path)

    return RepositoryBrowser(tmp_path, opener=opener)


@pytest.fixture
def client(browser: RepositoryBrowser) -> TestClient:
    return TestClient(create_app(browser=browser, logger=create_null_logger()))


def _client_for(browser: MagicMock) -> TestClient:
    return TestClient(create_app(browser=browser, logger=create_null_logger()))


class TestCreateApp:
    def test_builds_browser_from_config(self, tmp_path: Path) -> None:
        config = Config.from_dict(
            {"browser": {"root": str(tmp_path), "max_workers": 2}}
        )

        app = create_app(config, logger=create_null_logger())

        assert app.state.config is config
        assert app.state.browser.root == tmp_path

    def test_openapi_docs_disabled(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404


class TestHealth:
    def test_reports_healthy(self, client: TestClient) -> None:
        response = client.get(HEALTH_PATH)

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestRepositoriesApi:
    def test_lists_repositories(self, client: TestClient) -> None:
        response = client.get("/api/repositories")

        assert response.status_code == 200
        repositories = response.json()["repositories"]
        assert [r["name"] for r in repositories] == ["project"]
        assert repositories[0]["description"] == "A project"
        assert repositories[0]["last_activity"].startswith("2024-06-12T12:00:00")

    def test_not_found_is_json(self) -> None:
        browser = MagicMock(spec=RepositoryBrowser)
        browser.list_repositories.side_effect = RepositoryNotFoundError("gone", name="x")

        response = _client_for(browser).get("/api/repositories")

        assert response.status_code == 404
        assert response.json() == {"detail": "gone"}

    def test_failure_is_json(self) -> None:
        browser = MagicMock(spec=RepositoryBrowser)
        browser.list_repositories.side_effect = RepositoryError("boom")

        response = _client_for(browser).get("/api/repositories")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestPages:
    def test_index(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert 'href="/project"' in response.text
        assert "A project" in response.text
        assert "broken" not in response.text

    def test_repository_root(self, client: TestClient) -> None:
        response = client.get("/project")

        assert response.status_code == 200
        assert 'href="/project/tree/master/docs"' in response.text
        assert 'href="/project/blob/master/README.md"' in response.text
        assert "<h1>Project</h1>" in response.text

    def test_tree(self, client: TestClient) -> None:
        response = client.get("/project/tree/master/src")

        assert response.status_code == 200
        assert 'href="/project/blob/master/src/main.py"' in response.text
        assert 'href="/project/tree/master"' in response.text

    def test_blob(self, client: TestClient) -> None:
        response = client.get("/project/blob/master/src/main.py")

        assert response.status_code == 200
        assert "print(" in response.text
        assert 'href="/project/raw/master/src/main.py"' in response.text

    def test_binary_blob(self, client: TestClient) -> None:
        response = client.get("/project/blob/master/logo.png")

        assert response.status_code == 200
        assert "(Binary not shown)" in response.text

    def test_branches(self, client: TestClient) -> None:
        response = client.get("/project/branches")

        assert response.status_code == 200
        assert 'href="/project/tree/master"' in response.text
        assert "(default)" in response.text


class TestRaw:
    def test_text_file(self, client: TestClient) -> None:
        response = client.get("/project/raw/master/src/main.py")

        assert response.status_code == 200
        assert response.headers["content-type"] == "text/plain; charset=utf-8"
        assert response.headers["content-disposition"] == "inline; filename*=UTF-8''main.py"
        assert response.content == b"print('hi')\n"

    def test_binary_file(self, client: TestClient) -> None:
        response = client.get("/project/raw/master/logo.png")

        assert response.headers["content-type"] == "application/octet-stream"
        assert response.content == b"\x89PNG\x00\x00data"


class TestErrors:
    @pytest.mark.parametrize(
        "path",
        [
            "/missing",
            "/broken",
            "/project/tree/develop",
            "/project/tree/master/nope",
            "/project/blob/master/nope.txt",
            "/project/raw/master/nope.txt",
        ],
    )
    def test_not_found(self, client: TestClient, path: str) -> None:
        response = client.get(path)

        assert response.status_code == 404
        assert "<h1>404</h1>" in response.text

    def test_tree_of_file_redirects_to_blob(self, client: TestClient) -> None:
        response = client.get("/project/tree/master/src/main.py", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/project/blob/master/src/main.py"

    def test_blob_of_directory_redirects_to_tree(self, client: TestClient) -> None:
        response = client.get("/project/blob/master/src", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/project/tree/master/src"

    def test_blame_failure_is_server_error(
        self, client: TestClient, fake_repo: FakeRepository
    ) -> None:
        fake_repo.blame_failures.add("src/main.py")

        response = client.get("/project/tree/master/src")

        assert response.status_code == 500
        assert "Internal server error" in response.text


class TestRequestLogging:
    def test_logs_requests(self, browser: RepositoryBrowser, mocker: "MockerFixture") -> None:
        logger = mocker.MagicMock()
        client = TestClient(create_app(browser=browser, logger=logger))

        _ = client.get("/project")

        logger.info.assert_any_call(
            "request",
            method="GET",
            path="/project",
            status=200,
            duration_ms=mocker.ANY,
        )

    def test_skips_health_checks(
        self, browser: RepositoryBrowser, mocker: "MockerFixture"
    ) -> None:
        logger = mocker.MagicMock()
        client = TestClient(create_app(browser=browser, logger=logger))

        _ = client.get(HEALTH_PATH)

        logger.info.assert_not_called()

    def test_logs_failures(self, mocker: "MockerFixture") -> None:
        logger = mocker.MagicMock()
        browser = MagicMock(spec=RepositoryBrowser)
        browser.browse_root.side_effect = RepositoryError("boom")
        client = TestClient(create_app(browser=browser, logger=logger))

        _ = client.get("/project")

        logger.error.assert_called_once_with(
            "request_failed",
            method="GET",
            path="/project",
            error="RepositoryError",
            message="boom",
        )
