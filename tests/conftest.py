"""Shared fixtures: an in-memory stand-in for the GitHub API."""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from repo_manager.core.config import Config
from repo_manager.github import SessionManager

TOKEN = "ghp_test_token"


def make_remote_repo(
    repo_id: int,
    name: str,
    description: Optional[str] = None,
    private: bool = False,
    owner: str = "octocat",
    **extra: Any,
) -> SimpleNamespace:
    """Build an object shaped like a PyGithub ``Repository``."""
    attrs: Dict[str, Any] = {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": description,
        "owner": SimpleNamespace(login=owner),
        "html_url": f"https://github.com/{owner}/{name}",
        "private": private,
        "language": "Python",
        "stargazers_count": 3,
        "forks_count": 1,
        "created_at": datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 6, 7, 8, 9, 10, tzinfo=timezone.utc),
        "size": 128,
        "default_branch": "main",
    }
    attrs.update(extra)
    return SimpleNamespace(**attrs)


class FakeRemoteClient:
    """In-memory ``RemoteClient`` that records the calls made to it."""

    def __init__(self, repos: Optional[List[SimpleNamespace]] = None, login: str = "octocat"):
        self.repos = list(repos or [])
        self.login = login
        self.fail_authenticate = False
        self.fail_identity = False
        self.fail_listing = False
        self.fail_lookup = False
        self.fail_mutation = False
        self.listing_calls = 0
        self.mutation_calls: List[tuple] = []

    def authenticate(self) -> str:
        if self.fail_authenticate:
            raise ConnectionError("401 Bad credentials")
        return self.login

    def get_identity_login(self) -> str:
        if self.fail_identity:
            raise ConnectionError("network unreachable")
        return self.login

    def list_repositories_for_identity(self) -> List[SimpleNamespace]:
        self.listing_calls += 1
        if self.fail_listing:
            raise ConnectionError("network unreachable")
        return list(self.repos)

    def get_repository_by_id(self, repo_id: int) -> Optional[SimpleNamespace]:
        if self.fail_lookup:
            raise ConnectionError("network unreachable")
        for repo in self.repos:
            if repo.id == repo_id:
                return repo
        return None

    def set_repository_visibility(self, repo: SimpleNamespace, make_private: bool) -> SimpleNamespace:
        self.mutation_calls.append((repo.id, make_private))
        if self.fail_mutation:
            raise PermissionError("403 Must have admin rights to Repository")
        repo.private = make_private
        return repo


@pytest.fixture
def remote_repos() -> List[SimpleNamespace]:
    return [
        make_remote_repo(1, "alpha-api", description=None, private=False),
        make_remote_repo(2, "beta", description="Contains Alpha utilities", private=True),
        make_remote_repo(3, "gamma-docs", description="Documentation site", private=False),
    ]


@pytest.fixture
def fake_client(remote_repos) -> FakeRemoteClient:
    return FakeRemoteClient(remote_repos)


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def factory_calls() -> List[str]:
    return []


@pytest.fixture
def session_factory(config, fake_client, factory_calls):
    """Build sessions that hand out ``fake_client`` for a given environment."""

    def build(environ: Optional[Dict[str, str]] = None) -> SessionManager:
        def client_factory(token: str) -> FakeRemoteClient:
            factory_calls.append(token)
            return fake_client

        return SessionManager(
            config,
            client_factory=client_factory,
            environ={"GITHUB_TOKEN": TOKEN} if environ is None else environ,
        )

    return build


@pytest.fixture
def session(session_factory) -> SessionManager:
    session = session_factory()
    session.initialize()
    return session
