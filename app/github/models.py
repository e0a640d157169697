from dataclasses import dataclass
from enum import Enum

from app.github.errors import GitHubParseError


def _require_str(item: dict, key: str) -> str:
    value = item[key]
    if not isinstance(value, str):
        raise GitHubParseError(f"Expected a string for {key!r}, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Account:
    handle: str
    avatar_url: str

    @classmethod
    def from_api(cls, item: dict) -> "Account":
        return cls(handle=_require_str(item, "login"), avatar_url=item.get("avatar_url") or "")


@dataclass(frozen=True)
class Repository:
    name: str
    display_name: str
    description: str | None = None

    @classmethod
    def from_api(cls, item: dict) -> "Repository":
        name = _require_str(item, "name")
        return cls(
            name=name,
            display_name=item.get("full_name") or name,
            description=item.get("description")
        )


class ReadmeStatus(Enum):
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class ReadmeContent:
    repo_name: str
    text: str = ""
    status: ReadmeStatus = ReadmeStatus.LOADING
