"""Core infrastructure packages."""

from .config import AppConfig, Config, GitHubConfig, get_config
from .errors import (
    AuthenticationError,
    InvalidRequestError,
    MissingCredentialError,
    NotFoundError,
    RemoteFetchError,
    RemoteMutationError,
    RepoManagerError,
)
from .logging_ import get_logger, setup_logging

__all__ = [
    "AppConfig",
    "Config",
    "GitHubConfig",
    "get_config",
    "AuthenticationError",
    "InvalidRequestError",
    "MissingCredentialError",
    "NotFoundError",
    "RemoteFetchError",
    "RemoteMutationError",
    "RepoManagerError",
    "get_logger",
    "setup_logging",
]
