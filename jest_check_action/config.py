"""Configuration assembled from the GitHub Actions environment."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, SecretStr

REQUIRED_VARIABLES = ("GITHUB_SECRET", "GITHUB_SHA", "GITHUB_REPOSITORY")


class ConfigurationError(ValueError):
    """Raised when the environment does not describe a usable configuration."""


class ActionConfig(BaseModel):
    """Configuration for publishing check-run annotations."""

    token: SecretStr
    owner: str
    repo: str
    sha: str
    check_name: str = ""
    workspace: str = ""
    api_base_url: str = "https://api.github.com"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ActionConfig":
        """Build the configuration from environment variables.

        Args:
            environ: Variables to read from (defaults to ``os.environ``)

        Raises:
            ConfigurationError: If a required variable is missing or
                ``GITHUB_REPOSITORY`` is not in ``owner/repo`` format

        """
        if environ is None:
            environ = os.environ

        missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        repository = environ["GITHUB_REPOSITORY"]
        owner, _, repo = repository.partition("/")
        if not owner or not repo or "/" in repo:
            raise ConfigurationError(
                f"GITHUB_REPOSITORY must be in owner/repo format, got '{repository}'"
            )

        return cls(
            token=SecretStr(environ["GITHUB_SECRET"]),
            owner=owner,
            repo=repo,
            sha=environ["GITHUB_SHA"],
            check_name=environ.get("GITHUB_ACTION", ""),
            workspace=environ.get("GITHUB_WORKSPACE", ""),
            api_base_url=environ.get("GITHUB_API_URL") or "https://api.github.com",
        )
