"""GitHub API client and the remote capability the services depend on."""

from typing import Any, List, Optional, Protocol

from github import Auth, Github, UnknownObjectException

from ..core.config import GitHubConfig
from ..core.logging_ import get_logger

logger = get_logger(__name__)


class RemoteClient(Protocol):
    """Remote operations needed by the session and repository services.

    Repository objects returned here only need to expose the attributes
    read by ``Repository.from_github``.
    """

    def authenticate(self) -> str:
        """Check the credential against the remote API and return the login."""
        ...

    def get_identity_login(self) -> str:
        ...

    def list_repositories_for_identity(self) -> List[Any]:
        ...

    def get_repository_by_id(self, repo_id: int) -> Optional[Any]:
        """Return the repository, or None when the remote reports 404."""
        ...

    def set_repository_visibility(self, repo: Any, make_private: bool) -> Any:
        ...


class GitHubClient:
    """PyGithub-backed implementation of ``RemoteClient``."""

    def __init__(self, token: str, config: Optional[GitHubConfig] = None):
        config = config or GitHubConfig()
        self.token = token
        self.client = Github(
            base_url=config.api_url,
            auth=Auth.Token(token),
            timeout=config.timeout,
        )
        self.login: Optional[str] = None

    def authenticate(self) -> str:
        """Verify the token and remember the login it belongs to."""
        self.login = self.get_identity_login()
        return self.login

    def get_identity_login(self) -> str:
        # AuthenticatedUser is lazy; reading login issues GET /user.
        return self.client.get_user().login

    def list_repositories_for_identity(self) -> List[Any]:
        repositories = list(self.client.get_user().get_repos(type="all"))
        logger.debug(f"Fetched {len(repositories)} repositories from GitHub")
        return repositories

    def get_repository_by_id(self, repo_id: int) -> Optional[Any]:
        """Return the repository if the authenticated user owns or can write to it.

        ``get_repo`` resolves any public repository on GitHub, so others'
        repositories are reported as missing too.
        """
        try:
            repo = self.client.get_repo(repo_id)
        except UnknownObjectException:
            logger.debug(f"Repository {repo_id} not found on GitHub")
            return None

        if not self._belongs_to_identity(repo):
            logger.debug(f"Repository {repo_id} is not accessible to {self.login}")
            return None
        return repo

    def _belongs_to_identity(self, repo: Any) -> bool:
        if self.login is None:
            self.login = self.get_identity_login()

        owner = getattr(repo, "owner", None)
        if getattr(owner, "login", None) == self.login:
            return True

        permissions = getattr(repo, "permissions", None)
        return bool(getattr(permissions, "admin", False) or getattr(permissions, "push", False))

    def set_repository_visibility(self, repo: Any, make_private: bool) -> Any:
        # edit() refreshes the object's attributes from the response.
        repo.edit(private=make_private)
        return repo
