"""Repository listing, filtering and visibility changes."""

from enum import Enum
from typing import List, Optional

from ..core.errors import NotFoundError, RemoteFetchError, RemoteMutationError
from ..core.logging_ import get_logger
from .session import SessionManager
from .types import Repository

logger = get_logger(__name__)


class Visibility(str, Enum):
    """Visibility filter values."""
    ALL = "all"
    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Visibility":
        """Parse a filter value; unknown or missing values mean ALL."""
        if value is None:
            return cls.ALL
        try:
            return cls(value.lower())
        except ValueError:
            return cls.ALL


def filter_by_visibility(repo: Repository, visibility: Visibility) -> bool:
    if visibility is Visibility.PUBLIC:
        return not repo.is_private
    if visibility is Visibility.PRIVATE:
        return repo.is_private
    return True


def filter_by_search_term(repo: Repository, search_term: Optional[str]) -> bool:
    if search_term is None or not search_term.strip():
        return True

    term = search_term.casefold()
    if term in repo.name.casefold():
        return True
    return repo.description is not None and term in repo.description.casefold()


class RepositoryQueryEngine:
    """Fetches the authenticated user's repositories and filters them.

    Requires an initialized session: every call goes through
    ``SessionManager.client``, which raises ``AuthenticationError`` otherwise.
    Nothing is cached; each call performs its own remote listing.
    """

    def __init__(self, session: SessionManager):
        self.session = session

    def list_all(self) -> List[Repository]:
        """List all repositories for the authenticated user."""
        client = self.session.client
        try:
            remote_repos = client.list_repositories_for_identity()
        except Exception as e:
            logger.error(f"Failed to fetch repositories: {e}")
            raise RemoteFetchError("Failed to fetch repositories from GitHub") from e

        repositories = [Repository.from_github(repo) for repo in remote_repos]
        logger.debug(f"Found {len(repositories)} repositories")
        return repositories

    def list_filtered(
        self,
        visibility: Optional[str] = None,
        search_term: Optional[str] = None,
    ) -> List[Repository]:
        """List repositories matching a visibility and a search term.

        The search term matches name or description as a case-insensitive
        substring. Results keep the order of the remote listing.
        """
        repositories = self.list_all()
        parsed = Visibility.parse(visibility)

        return [
            repo
            for repo in repositories
            if filter_by_visibility(repo, parsed) and filter_by_search_term(repo, search_term)
        ]


class RepositoryMutator:
    """Changes repository visibility on GitHub."""

    def __init__(self, session: SessionManager):
        self.session = session

    def set_visibility(self, repo_id: int, make_private: bool) -> Repository:
        """Set a repository private or public and return its new state.

        Not short-circuited when the repository already has the requested
        visibility; the remote call is always made.
        """
        client = self.session.client
        target = "private" if make_private else "public"

        try:
            remote_repo = client.get_repository_by_id(repo_id)
        except Exception as e:
            logger.error(f"Failed to look up repository {repo_id}: {e}")
            raise RemoteMutationError("Failed to update repository visibility") from e

        if remote_repo is None:
            raise NotFoundError(f"Repository not found with ID: {repo_id}")

        try:
            updated = client.set_repository_visibility(remote_repo, make_private)
        except Exception as e:
            logger.error(f"Failed to set repository {repo_id} visibility to {target}: {e}")
            raise RemoteMutationError("Failed to update repository visibility") from e

        repository = Repository.from_github(updated)
        logger.info(f"Successfully updated repository {repository.name} visibility to {target}")
        return repository
