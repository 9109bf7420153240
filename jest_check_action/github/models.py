"""Pydantic models for the GitHub check runs API."""

from collections.abc import Sequence
from typing import Literal, TypeAlias

from jest_check_action.models.base import Model

CheckRunStatus: TypeAlias = Literal[
    "queued",
    "in_progress",
    "completed",
    "waiting",
    "requested",
    "pending",
]


class Annotation(Model):
    """A file/line anchored comment attached to a check run."""

    path: str
    start_line: int
    end_line: int
    annotation_level: Literal["notice", "warning", "failure"] = "failure"
    title: str
    message: str


class CheckRunOutput(Model):
    """Output object sent when updating a check run."""

    title: str
    summary: str
    annotations: Sequence[Annotation] = ()


class CheckRun(Model):
    """A check run from the GitHub checks API."""

    id: int
    name: str
    head_sha: str
    status: CheckRunStatus
    html_url: str | None = None


class CheckRunsResponse(Model):
    """Response from list check runs for a ref API."""

    total_count: int
    check_runs: Sequence[CheckRun]
