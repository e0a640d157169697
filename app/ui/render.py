from app.github.models import ReadmeContent, ReadmeStatus
from app.state.coordinator import RequestCoordinator, RequestKind

LOADING_USERS = "Loading users..."
LOADING_REPOS = "Loading repositories..."
LOADING_README = "Loading README..."
README_NOT_FOUND = "README not found."
README_ERROR = "Error loading README."
SHOW_README = "Show README"
HIDE_README = "Hide README"


def loading_text(coordinator: RequestCoordinator) -> str:
    if coordinator.is_loading(RequestKind.SEARCH):
        return LOADING_USERS
    if coordinator.is_loading(RequestKind.REPOSITORIES):
        return LOADING_REPOS
    return ""


def suggestion_items(coordinator: RequestCoordinator) -> list[tuple[str, str]]:
    """
    Gallery items: (avatar url, login caption).
    """
    return [(a.avatar_url, a.handle) for a in coordinator.state.suggested_accounts]


def repository_card(repo) -> str:
    lines = [f"**{repo.name}**"]
    if repo.description:
        lines.append(repo.description)
    return "\n\n".join(lines)


def repository_cards(coordinator: RequestCoordinator) -> str:
    state = coordinator.state
    if state.suggested_accounts or coordinator.is_loading(RequestKind.REPOSITORIES):
        return ""
    return "\n\n---\n\n".join(repository_card(r) for r in state.repositories)


def readme_text(readme: ReadmeContent | None) -> str:
    if readme is None:
        return ""
    if readme.status is ReadmeStatus.LOADING:
        return LOADING_README
    if readme.status is ReadmeStatus.NOT_FOUND:
        return README_NOT_FOUND
    if readme.status is ReadmeStatus.ERROR:
        return README_ERROR
    return readme.text


def toggle_label(coordinator: RequestCoordinator, repo_name: str | None) -> str:
    if repo_name and coordinator.state.expanded_repo == repo_name:
        return HIDE_README
    return SHOW_README
