"""Type definitions for GitHub package."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional


def to_local_time(value: Any) -> Optional[datetime]:
    """Convert a remote timestamp to naive local wall-clock time.

    Naive values are taken to be UTC, which is what older PyGithub
    releases return.
    """
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone().replace(tzinfo=None)


def _attr(remote: Any, name: str, default: Any = None) -> Any:
    value = getattr(remote, name, None)
    return default if value is None else value


@dataclass(frozen=True)
class Repository:
    """Repository information."""
    id: int
    name: str
    full_name: str
    description: Optional[str]
    owner: str
    html_url: str
    is_private: bool
    language: Optional[str]
    stargazers_count: int
    forks_count: int
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
    size: int
    default_branch: str

    @classmethod
    def from_github(cls, repo: Any) -> "Repository":
        """Create Repository from a PyGithub object.

        Missing attributes map to empty values instead of raising, so any
        object exposing the GitHub repository attributes can be mapped.
        """
        return cls(
            id=_attr(repo, "id", 0),
            name=_attr(repo, "name", ""),
            full_name=_attr(repo, "full_name", ""),
            description=_attr(repo, "description"),
            owner=_attr(_attr(repo, "owner"), "login", ""),
            html_url=_attr(repo, "html_url", ""),
            is_private=bool(_attr(repo, "private", False)),
            language=_attr(repo, "language"),
            stargazers_count=_attr(repo, "stargazers_count", 0),
            forks_count=_attr(repo, "forks_count", 0),
            created_at=to_local_time(_attr(repo, "created_at")),
            updated_at=to_local_time(_attr(repo, "updated_at")),
            size=_attr(repo, "size", 0),
            default_branch=_attr(repo, "default_branch", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by the API."""
        return {
            "id": self.id,
            "name": self.name,
            "fullName": self.full_name,
            "description": self.description,
            "owner": self.owner,
            "htmlUrl": self.html_url,
            "isPrivate": self.is_private,
            "language": self.language,
            "stargazersCount": self.stargazers_count,
            "forksCount": self.forks_count,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
            "size": self.size,
            "defaultBranch": self.default_branch,
        }
