"""Authenticated GitHub session shared by the repository services."""

import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from ..core.config import Config, get_config
from ..core.errors import AuthenticationError, MissingCredentialError
from ..core.logging_ import get_logger
from .client import GitHubClient, RemoteClient

logger = get_logger(__name__)

ClientFactory = Callable[[str], RemoteClient]


@dataclass(frozen=True)
class AuthState:
    """Authentication state; ``identity`` is None until initialized."""
    identity: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.identity is not None


class SessionManager:
    """Owns the access token and the single authenticated client.

    The session is created once at startup with ``initialize()`` and then
    handed to the services that need it. There is no re-authentication.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        client_factory: Optional[ClientFactory] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.config = config or get_config()
        self._client_factory = client_factory or self._default_client_factory
        self._environ = environ if environ is not None else os.environ
        self._token: Optional[str] = None
        self._client: Optional[RemoteClient] = None
        self._state = AuthState()

    def _default_client_factory(self, token: str) -> RemoteClient:
        return GitHubClient(token, self.config.github)

    @property
    def token_env(self) -> str:
        return self.config.github.token_env

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def client(self) -> RemoteClient:
        """The authenticated client; raises when not initialized."""
        if self._client is None or not self._state.authenticated:
            raise AuthenticationError(
                "Not authenticated with GitHub. The session has not been initialized."
            )
        return self._client

    def initialize(self) -> None:
        """Read the token, build the client and verify it against GitHub."""
        if self._state.authenticated:
            raise RuntimeError("GitHub session is already initialized")

        token = self._environ.get(self.token_env)
        if token is None or not token.strip():
            logger.error(f"GitHub access token not found in environment variable {self.token_env}")
            raise MissingCredentialError(
                f"GitHub Personal Access Token not found. "
                f"Please set the {self.token_env} environment variable."
            )

        try:
            client = self._client_factory(token)
            identity = client.authenticate()
        except Exception as e:
            logger.error(f"Failed to authenticate with GitHub: {e}")
            raise AuthenticationError(
                "Failed to authenticate with GitHub. Please check your Personal Access Token."
            ) from e

        self._token = token
        self._client = client
        self._state = AuthState(identity=identity)
        logger.info(f"Successfully authenticated with GitHub as {identity}")

    def is_authenticated(self) -> bool:
        return self._client is not None and self._state.authenticated

    def get_authenticated_identity(self) -> Optional[str]:
        """Resolve the current login, or None if it cannot be fetched."""
        if not self.is_authenticated():
            return None
        try:
            return self._client.get_identity_login()
        except Exception as e:
            logger.error(f"Failed to get authenticated user: {e}")
            return None
