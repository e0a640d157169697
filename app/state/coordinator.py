import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.github.github_client import GitHubClient
from app.state.selection import Phase, SelectionStateMachine

logger = logging.getLogger(__name__)


class RequestKind(Enum):
    SEARCH = "search"
    REPOSITORIES = "repositories"
    README = "readme"


class RequestStatus(Enum):
    IDLE = "idle"
    PENDING = "pending"
    SETTLED = "settled"


@dataclass(frozen=True)
class RequestTicket:
    kind: RequestKind
    generation: int
    argument: Any


class RequestCoordinator:
    """
    Issues one request per intent and makes sure only the latest
    request of each kind may touch the session when it resolves.

    Every new request bumps the generation of its kind; a response whose
    ticket carries an older generation is dropped. Intents that reset
    downstream state (a new search, a new account) also supersede the
    downstream kinds so a late repo list or README cannot reappear.

    Gradio calls handlers from worker threads, so intents and the
    live-check-then-apply step in resolve() run under one lock.
    Network calls in fetch() do not.
    """

    def __init__(self, client: GitHubClient, machine: SelectionStateMachine | None = None):
        self.client = client
        self.machine = machine or SelectionStateMachine()
        self._generations = {kind: 0 for kind in RequestKind}
        self._statuses = {kind: RequestStatus.IDLE for kind in RequestKind}
        self._lock = threading.RLock()

    @property
    def state(self):
        return self.machine.state

    def status(self, kind: RequestKind) -> RequestStatus:
        return self._statuses[kind]

    def is_loading(self, kind: RequestKind) -> bool:
        return self._statuses[kind] is RequestStatus.PENDING

    def is_live(self, ticket: RequestTicket) -> bool:
        return ticket.generation == self._generations[ticket.kind]

    def _issue(self, kind: RequestKind, argument) -> RequestTicket:
        self._generations[kind] += 1
        self._statuses[kind] = RequestStatus.PENDING
        return RequestTicket(kind, self._generations[kind], argument)

    def _supersede(self, *kinds: RequestKind):
        for kind in kinds:
            self._generations[kind] += 1
            self._statuses[kind] = RequestStatus.IDLE

    # --- Intents ---

    def submit_text(self, text: str) -> RequestTicket | None:
        with self._lock:
            if not self.machine.submit_search(text):
                return None
            self._supersede(RequestKind.REPOSITORIES, RequestKind.README)
            return self._issue(RequestKind.SEARCH, self.state.query_text)

    def select_account(self, handle: str) -> RequestTicket | None:
        if not handle:
            return None
        with self._lock:
            self._supersede(RequestKind.SEARCH, RequestKind.README)
            self.machine.select_account(handle)
            return self._issue(RequestKind.REPOSITORIES, handle)

    def load_repos_for(self, handle: str) -> RequestTicket | None:
        """
        Reloads the repository list of handle. Switching to another
        account goes through the same transition as select_account.
        """
        with self._lock:
            if self.state.active_account == handle and self.machine.phase is Phase.LOADING_REPOS:
                return self._issue(RequestKind.REPOSITORIES, handle)
            return self.select_account(handle)

    def toggle_readme(self, repo_name: str) -> RequestTicket | None:
        with self._lock:
            was_expanded = self.machine.readme_expanded
            placeholder = self.machine.toggle_readme(repo_name)
            if placeholder is None:
                if was_expanded and not self.machine.readme_expanded:
                    self._supersede(RequestKind.README)
                return None
            # Always refetched on expand.
            return self._issue(RequestKind.README, (self.state.active_account, repo_name))

    # --- Fetch completion ---

    def fetch(self, ticket: RequestTicket):
        if ticket.kind is RequestKind.SEARCH:
            return self.client.search_accounts(ticket.argument)
        if ticket.kind is RequestKind.REPOSITORIES:
            return self.client.list_repositories(ticket.argument)
        if ticket.kind is RequestKind.README:
            handle, repo_name = ticket.argument
            return self.client.fetch_readme(handle, repo_name)
        raise ValueError(f"Unknown request kind: {ticket.kind}")

    def resolve(self, ticket: RequestTicket, result) -> bool:
        if ticket.kind not in self._generations:
            raise ValueError(f"Unknown request kind: {ticket.kind}")

        with self._lock:
            if not self.is_live(ticket):
                logger.debug(
                    "Dropping stale %s response (generation %s, current %s)",
                    ticket.kind.value, ticket.generation, self._generations[ticket.kind]
                )
                return False

            if ticket.kind is RequestKind.SEARCH:
                self.machine.suggestions_loaded(result)
            elif ticket.kind is RequestKind.REPOSITORIES:
                self.machine.repositories_loaded(result)
            else:
                self.machine.readme_loaded(result)

            self._statuses[ticket.kind] = RequestStatus.SETTLED
            return True

    def run(self, ticket: RequestTicket | None) -> bool:
        if ticket is None:
            return False
        return self.resolve(ticket, self.fetch(ticket))
