"""Tests for the text shown on the page."""

from __future__ import annotations

from app.github.models import ReadmeContent, ReadmeStatus, Repository
from app.state.coordinator import RequestKind
from app.ui.render import (
    HIDE_README,
    LOADING_README,
    LOADING_REPOS,
    LOADING_USERS,
    README_ERROR,
    README_NOT_FOUND,
    SHOW_README,
    loading_text,
    readme_text,
    repository_card,
    repository_cards,
    suggestion_items,
    toggle_label,
)


def test_readme_text_per_status():
    assert readme_text(None) == ""
    assert readme_text(ReadmeContent("r")) == LOADING_README
    assert readme_text(ReadmeContent("r", "", ReadmeStatus.NOT_FOUND)) == "README not found."
    assert readme_text(ReadmeContent("r", "", ReadmeStatus.ERROR)) == "Error loading README."
    assert readme_text(ReadmeContent("r", "# Title", ReadmeStatus.LOADED)) == "# Title"


def test_not_found_and_error_stay_distinct():
    assert README_NOT_FOUND != README_ERROR


def test_repository_card_without_description():
    assert repository_card(Repository("Spoon-Knife", "octocat/Spoon-Knife")) == "**Spoon-Knife**"


def test_loading_text_tracks_live_class(coordinator):
    assert loading_text(coordinator) == ""

    ticket = coordinator.submit_text("octo")
    assert loading_text(coordinator) == LOADING_USERS
    coordinator.run(ticket)
    assert loading_text(coordinator) == ""

    ticket = coordinator.select_account("octocat")
    assert loading_text(coordinator) == LOADING_REPOS
    assert repository_cards(coordinator) == ""
    coordinator.run(ticket)
    assert not coordinator.is_loading(RequestKind.REPOSITORIES)


def test_suggestion_items_use_avatar_and_login(coordinator):
    coordinator.run(coordinator.submit_text("octo"))
    assert suggestion_items(coordinator) == [("https://avatars.example.test/octocat", "octocat")]


def test_repository_cards_list_every_repo(showing_repos):
    cards = repository_cards(showing_repos)
    assert "**Hello-World**\n\nMy first repo" in cards
    assert "**Spoon-Knife**" in cards


def test_toggle_label(showing_repos):
    assert toggle_label(showing_repos, "Hello-World") == SHOW_README
    showing_repos.toggle_readme("Hello-World")
    assert toggle_label(showing_repos, "Hello-World") == HIDE_README
    assert toggle_label(showing_repos, "Spoon-Knife") == SHOW_README
    assert toggle_label(showing_repos, None) == SHOW_README
