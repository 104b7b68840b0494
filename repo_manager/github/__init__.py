"""GitHub integration package."""

from .client import GitHubClient, RemoteClient
from .service import RepositoryMutator, RepositoryQueryEngine, Visibility
from .session import AuthState, SessionManager
from .types import Repository

__all__ = [
    "GitHubClient",
    "RemoteClient",
    "RepositoryMutator",
    "RepositoryQueryEngine",
    "Visibility",
    "AuthState",
    "SessionManager",
    "Repository",
]
