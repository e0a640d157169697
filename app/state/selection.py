import logging
from enum import Enum

from app.github.models import Account, ReadmeContent, Repository
from app.utils.session_state import SessionState

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    SHOWING_SUGGESTIONS = "showing_suggestions"
    LOADING_REPOS = "loading_repos"
    SHOWING_REPOS = "showing_repos"


def dedupe_accounts(accounts: list[Account]) -> list[Account]:
    by_handle = {}
    for account in accounts:
        by_handle.setdefault(account.handle, account)
    return list(by_handle.values())


class SelectionStateMachine:
    """
    Tracks what the user is looking at: suggestions, the chosen account,
    its repositories and the expanded README.

    User intents (submit_search, select_account, toggle_readme) apply
    immediately. The *_loaded methods are fed by fetch completions and
    must only be called for responses that are still live.
    """

    def __init__(self, state: SessionState | None = None):
        self.state = state or SessionState()
        self.phase = Phase.IDLE

    def _enter(self, phase: Phase):
        logger.debug("Session %s: %s -> %s", self.state.session_id, self.phase.value, phase.value)
        self.phase = phase

    @property
    def readme_expanded(self) -> bool:
        return self.state.expanded_repo is not None

    def submit_search(self, text: str) -> bool:
        if not text or not text.strip():
            return False
        text = text.strip()

        self.state.query_text = text
        self.state.suggested_accounts = []
        self.state.clear_selection()
        self._enter(Phase.SEARCHING)
        return True

    def suggestions_loaded(self, accounts: list[Account]):
        self.state.suggested_accounts = dedupe_accounts(accounts)
        self._enter(Phase.SHOWING_SUGGESTIONS)

    def select_account(self, handle: str):
        # Cleared before the repo list is fetched.
        self.state.suggested_accounts = []
        self.state.clear_selection()
        self.state.active_account = handle
        self._enter(Phase.LOADING_REPOS)

    def repositories_loaded(self, repositories: list[Repository]):
        self.state.repositories = list(repositories)
        self.state.clear_expansion()
        self._enter(Phase.SHOWING_REPOS)

    def toggle_readme(self, repo_name: str) -> ReadmeContent | None:
        """
        Expands repo_name, collapses it if it is already expanded,
        or switches expansion straight to it from another repo.
        Returns the placeholder README to fetch, None when collapsed
        or ignored.
        """
        if self.phase is not Phase.SHOWING_REPOS:
            return None
        if self.state.find_repository(repo_name) is None:
            logger.debug("Ignoring toggle for unknown repo %r", repo_name)
            return None

        if self.state.expanded_repo == repo_name:
            self.state.clear_expansion()
            return None

        self.state.expanded_repo = repo_name
        self.state.readme = ReadmeContent(repo_name)
        return self.state.readme

    def readme_loaded(self, content: ReadmeContent) -> bool:
        if content.repo_name != self.state.expanded_repo:
            return False
        self.state.readme = content
        return True
