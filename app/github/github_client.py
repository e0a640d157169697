import logging
from urllib.parse import quote

import requests

from app.config import GitHubConfig
from app.github.errors import (
    GitHubClientError,
    GitHubParseError,
    GitHubStatusError,
    GitHubTransportError,
)
from app.github.models import Account, ReadmeContent, ReadmeStatus, Repository

logger = logging.getLogger(__name__)

RAW_MEDIA_TYPE = "application/vnd.github.v3.raw"


class GitHubClient:
    """
    Read-only lookups against the GitHub REST API.
    Public methods never raise: failures become empty lists
    or an ERROR / NOT_FOUND readme.
    """

    def __init__(self, config: GitHubConfig):
        self.config = config
        self._base_headers = config.auth_headers()

    def _get(self, path: str, params: dict | None = None, accept: str | None = None):
        url = f"{self.config.api_url}{path}"
        headers = dict(self._base_headers)
        if accept:
            headers["Accept"] = accept

        try:
            r = requests.get(url, headers=headers, params=params)
        except requests.RequestException as e:
            raise GitHubTransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= r.status_code < 300:
            raise GitHubStatusError(r.status_code, url)
        return r

    def _get_json(self, path: str, params: dict | None = None):
        r = self._get(path, params=params)
        try:
            return r.json()
        except ValueError as e:
            raise GitHubParseError(f"Malformed JSON from {path}") from e

    def search_accounts(self, text: str) -> list[Account]:
        try:
            data = self._get_json("/search/users", params={"q": text})
            if not isinstance(data, dict):
                raise GitHubParseError("Search response is not an object.")
            return [Account.from_api(item) for item in data.get("items") or []]
        except (GitHubClientError, KeyError, TypeError) as e:
            logger.warning("Error fetching users for %r: %s", text, e)
            return []

    def list_repositories(self, handle: str) -> list[Repository]:
        try:
            data = self._get_json(f"/users/{quote(handle)}/repos")
            if not isinstance(data, list):
                raise GitHubParseError("Repository list response is not a list.")
            return [Repository.from_api(item) for item in data]
        except (GitHubClientError, KeyError, TypeError) as e:
            logger.warning("Error loading repos for %s: %s", handle, e)
            return []

    def fetch_readme(self, handle: str, repo_name: str) -> ReadmeContent:
        path = f"/repos/{quote(handle)}/{quote(repo_name)}/readme"
        try:
            r = self._get(path, accept=RAW_MEDIA_TYPE)
            text = r.text
        except GitHubStatusError as e:
            logger.info("No README for %s/%s (%s)", handle, repo_name, e.status_code)
            return ReadmeContent(repo_name, "", ReadmeStatus.NOT_FOUND)
        except (GitHubClientError, ValueError) as e:
            logger.warning("Error loading README for %s/%s: %s", handle, repo_name, e)
            return ReadmeContent(repo_name, "", ReadmeStatus.ERROR)

        return ReadmeContent(repo_name, text, ReadmeStatus.LOADED)
