"""
Shared fixtures for the usersearch test suite.

Every test gets its own application built from explicit settings, so
dataset location and rate limits never leak between tests.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from usersearch.core.config import DEFAULT_DATASET_PATH, Settings
from usersearch.main import create_app

ACCESS_TOKEN = "2a54a886a8bbcc309ae4ffa75241cd6d"
SEARCH_PATH = "/api/v1/users"


def _write_dataset(directory: Path, rows: list[dict[str, str]], name: str) -> Path:
    """Write a small XML dataset with the given rows and return its path."""
    body = "".join(
        "<row>" + "".join(f"<{k}>{v}</{k}>" for k, v in row.items()) + "</row>"
        for row in rows
    )
    path = directory / name
    path.write_text(f'<?xml version="1.0" encoding="UTF-8" ?><root>{body}</root>')
    return path


def _row(
    id: str = "0",
    first_name: str = "Ann",
    last_name: str = "Lee",
    age: str = "30",
    about: str = "About text",
    gender: str = "female",
) -> dict[str, str]:
    """Build one raw dataset row with sensible defaults."""
    return {
        "id": id,
        "first_name": first_name,
        "last_name": last_name,
        "age": age,
        "about": about,
        "gender": gender,
    }


@pytest.fixture
def make_row():
    """Factory for raw dataset rows."""
    return _row


@pytest.fixture
def write_dataset(tmp_path: Path):
    """Write rows (or raw text) to an XML file under tmp_path and return its path."""

    def _write(
        rows: list[dict[str, str]] | None = None,
        raw: str | None = None,
        name: str = "dataset.xml",
    ) -> Path:
        if raw is not None:
            path = tmp_path / name
            path.write_text(raw)
            return path
        return _write_dataset(tmp_path, rows or [], name)

    return _write


@pytest.fixture
def access_token() -> str:
    return ACCESS_TOKEN


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at the bundled 26-record dataset, rate limiting off."""
    return Settings(
        dataset_path=DEFAULT_DATASET_PATH,
        access_tokens=[ACCESS_TOKEN],
        rate_limit_enabled=False,
    )


@pytest.fixture
def search_url() -> str:
    """Absolute URL of the search endpoint as seen through a TestClient."""
    return f"http://testserver{SEARCH_PATH}"


@pytest.fixture
def make_client(settings: Settings):
    """Build a TestClient for an app whose settings differ from the default."""
    clients: list[TestClient] = []

    def _make(**overrides) -> TestClient:
        test_client = TestClient(create_app(settings.model_copy(update=overrides)))
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        test_client.close()


@pytest.fixture
def client(make_client) -> TestClient:
    """A TestClient for an app built from the default test settings."""
    return make_client()


@pytest.fixture
def search(client: TestClient, access_token: str):
    """Call the search endpoint with a valid token and the given params."""

    def _search(**params):
        return client.get(
            SEARCH_PATH, params=params, headers={"AccessToken": access_token}
        )

    return _search
