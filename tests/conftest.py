from collections.abc import Generator
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

from cqueue.main import create_app
from cqueue.v1.jobs.models import JobType
from cqueue.v1.jobs.repository import InMemoryJobRepository
from cqueue_cli.utils.config_manager import config


@pytest.fixture
def repository() -> InMemoryJobRepository:
    """Fresh, empty job repository."""
    return InMemoryJobRepository()


@pytest.fixture
def populated_repository(repository) -> InMemoryJobRepository:
    """Repository holding six TIME_CRITICAL jobs, all queued."""
    for _ in range(6):
        repository.enqueue(JobType.TIME_CRITICAL)
    return repository


@pytest.fixture
def app(repository):
    """FastAPI application bound to the test repository."""
    return create_app(repository)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def runner():
    """CLI test runner"""
    return CliRunner()


@pytest.fixture
def mock_client():
    """Mock API client usable as a context manager"""
    client = Mock()
    client.__enter__ = Mock(return_value=client)
    client.__exit__ = Mock(return_value=None)
    return client


@pytest.fixture(autouse=True)
def isolated_cli_config(tmp_path, monkeypatch):
    """Keep CLI configuration out of the real home directory."""
    config_dir = tmp_path / ".cqueue"
    monkeypatch.setattr(config, "config_dir", config_dir)
    monkeypatch.setattr(config, "config_file", config_dir / "config.yaml")
    monkeypatch.delenv("CQUEUE_API_URL", raising=False)
    return config_dir
