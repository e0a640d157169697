"""Shared fixtures for the viewer tests."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from app.config import GitHubConfig
from app.github.github_client import GitHubClient
from app.github.models import Account, ReadmeContent, ReadmeStatus, Repository
from app.state.coordinator import RequestCoordinator


def make_response(status_code=200, json_data=None, text="", json_error=False):
    """Build a stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    if json_error:
        response.json.side_effect = requests.JSONDecodeError("Expecting value", "", 0)
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def config():
    return GitHubConfig(token="test-token", api_url="https://api.example.test")


@pytest.fixture
def client(config):
    return GitHubClient(config)


@pytest.fixture
def fake_client():
    """A client whose three lookups are plain mocks."""
    fake = Mock(spec=GitHubClient)
    fake.search_accounts.return_value = [
        Account("octocat", "https://avatars.example.test/octocat"),
    ]
    fake.list_repositories.return_value = [
        Repository("Hello-World", "octocat/Hello-World", "My first repo"),
    ]
    fake.fetch_readme.side_effect = lambda handle, repo: ReadmeContent(
        repo, f"# {repo}", ReadmeStatus.LOADED
    )
    return fake


@pytest.fixture
def coordinator(fake_client):
    return RequestCoordinator(fake_client)


@pytest.fixture
def showing_repos(coordinator, fake_client):
    """Coordinator already showing octocat's repositories."""
    fake_client.list_repositories.return_value = [
        Repository("Hello-World", "octocat/Hello-World", "My first repo"),
        Repository("Spoon-Knife", "octocat/Spoon-Knife", None),
    ]
    coordinator.run(coordinator.submit_text("octo"))
    coordinator.run(coordinator.select_account("octocat"))
    return coordinator
