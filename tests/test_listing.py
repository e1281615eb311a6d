from typing import List

import pytest

from repo_picker.config import GitHubConfig
from repo_picker.error_handling import EmptyInputError, EnumerationError, NoRepositoriesError
from repo_picker.repository import (
    Capabilities, GhCli, GhCliLister, PublicApiLister, RepositoryLister,
    enumerate_repositories, select_lister
)


class FakeLister(RepositoryLister):
    source = "fake"

    def __init__(self, identifiers: List[str]):
        self.identifiers = identifiers
        self.accounts: List[str] = []

    def list_repositories(self, account: str) -> List[str]:
        self.accounts.append(account)
        return list(self.identifiers)


def test_authenticated_gh_selects_cli_lister(fake_path):
    fake_path(["gh"])
    lister = select_lister(Capabilities(True, True), GitHubConfig(), GhCli())

    assert isinstance(lister, GhCliLister)
    assert lister.limit == 200


@pytest.mark.parametrize("capabilities", [Capabilities(False, False), Capabilities(True, False)])
def test_anything_else_selects_public_api(fake_path, capabilities):
    fake_path([])
    lister = select_lister(capabilities, GitHubConfig(page_size=50), GhCli())

    assert isinstance(lister, PublicApiLister)
    assert lister.per_page == 50
    assert lister.client.base_url == "https://api.github.com"


def test_results_are_sorted():
    lister = FakeLister(["alice/a", "alice/zebra", "alice/m"])

    repos = enumerate_repositories(lister, "alice")

    assert [r.full_name for r in repos] == ["alice/a", "alice/m", "alice/zebra"]


def test_sorting_uses_the_full_identifier():
    lister = FakeLister(["a/x", "a-b/x", "B/x"])

    repos = enumerate_repositories(lister, "a")

    assert [r.full_name for r in repos] == ["B/x", "a-b/x", "a/x"]


def test_duplicates_are_removed():
    lister = FakeLister(["alice/a", "alice/b", "alice/a"])

    repos = enumerate_repositories(lister, "alice")

    assert [r.full_name for r in repos] == ["alice/a", "alice/b"]


def test_account_name_is_stripped():
    lister = FakeLister(["alice/a"])

    enumerate_repositories(lister, "  alice \n")

    assert lister.accounts == ["alice"]


@pytest.mark.parametrize("account", ["", "   ", "\t\n"])
def test_blank_account_fails_before_listing(account):
    lister = FakeLister(["alice/a"])

    with pytest.raises(EmptyInputError):
        enumerate_repositories(lister, account)

    assert lister.accounts == []


def test_no_repositories():
    with pytest.raises(NoRepositoriesError) as excinfo:
        enumerate_repositories(FakeLister([]), "ghost")

    assert excinfo.value.message == "No repositories found for 'ghost'."
    assert isinstance(excinfo.value, EnumerationError)


def test_public_api_lister_delegates_to_client():
    class Client:
        def list_user_repositories(self, account, per_page):
            return [f"{account}/{per_page}"]

    assert PublicApiLister(Client(), 7).list_repositories("bob") == ["bob/7"]
