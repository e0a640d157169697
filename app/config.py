import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "https://api.github.com"


@dataclass(frozen=True)
class GitHubConfig:
    token: str | None = None
    api_url: str = DEFAULT_API_URL
    log_level: str = "INFO"

    def auth_headers(self) -> dict:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}


def load_config() -> GitHubConfig:
    """
    Reads the GitHub settings once at startup.
    Values in a local .env file are picked up as well.
    """
    load_dotenv()
    return GitHubConfig(
        token=os.getenv("GITHUB_TOKEN") or None,
        api_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper()
    )
