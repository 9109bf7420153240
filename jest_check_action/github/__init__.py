"""GitHub check runs API module."""

from jest_check_action.github.client import CheckRunApiError, ChecksClient
from jest_check_action.github.models import (
    Annotation,
    CheckRun,
    CheckRunOutput,
    CheckRunsResponse,
)

__all__ = [
    "Annotation",
    "CheckRun",
    "CheckRunApiError",
    "CheckRunOutput",
    "CheckRunsResponse",
    "ChecksClient",
]
