"""Configuration loader with environment variable support."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv

load_dotenv()


@dataclass
class AppConfig:
    name: str = "repo-manager"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8081
    api_prefix: str = "/api"
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:4200"])


@dataclass
class GitHubConfig:
    api_url: str = "https://api.github.com"
    token_env: str = "GITHUB_TOKEN"
    timeout: int = 30


@dataclass
class Config:
    app: AppConfig = field(default_factory=AppConfig)
    github: GitHubConfig = field(default_factory=GitHubConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        config = cls()

        if "app" in data:
            config.app = AppConfig(**data["app"])

        if "github" in data:
            config.github = GitHubConfig(**data["github"])

        return config

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> "Config":
        if config_path is None:
            config_path = os.getenv("CONFIG_PATH", "config.yaml")

        path = Path(config_path)

        if path.exists():
            with open(path, "r") as f:
                data = yaml.safe_load(f)
            return cls.from_dict(data or {})

        return cls()


def get_config() -> Config:
    return Config.load()
