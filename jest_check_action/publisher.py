"""Publishing of annotations to the check run of the current commit."""

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeVar

from jest_check_action.config import ActionConfig
from jest_check_action.github.client import ChecksClient
from jest_check_action.github.models import Annotation, CheckRun, CheckRunOutput

log = logging.getLogger(__name__)

MAX_ANNOTATIONS_PER_REQUEST = 50
OUTPUT_TITLE = "Result"


T = TypeVar("T")


class CheckRunNotFoundError(RuntimeError):
    """Raised when the commit has no check run to annotate."""


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of at most ``size`` items."""
    for start in range(0, len(items), size):
        yield items[start : start + size]


@dataclass(frozen=True, kw_only=True)
class AnnotationPublisher:
    """Uploads annotations and a summary to the check run of a commit."""

    client: ChecksClient
    config: ActionConfig

    async def resolve_check_run(self) -> CheckRun:
        """Find the check run to annotate.

        The first check run listed for the commit is used; runs are not
        matched against the configured check name.

        Raises:
            CheckRunNotFoundError: If the commit has no check runs

        """
        check_runs = await self.client.list_check_runs_for_ref(self.config.sha)

        for check_run in check_runs:
            log.debug(
                "Found check run: id=%s, name=%s, status=%s",
                check_run.id,
                check_run.name,
                check_run.status,
            )

        if not check_runs:
            raise CheckRunNotFoundError(
                f"Unable to find check run for action: {self.config.check_name}"
            )

        return check_runs[0]

    async def publish(
        self,
        check_run: CheckRun,
        annotations: Sequence[Annotation],
        summary: str,
    ) -> int:
        """Upload annotations in batches, each carrying the full summary.

        Stops at the first failing batch; later batches are not attempted.

        Returns:
            Number of update requests issued

        """
        batches = 0
        for batch in chunked(annotations, MAX_ANNOTATIONS_PER_REQUEST):
            await self.client.update_check_run(
                check_run.id,
                name=self.config.check_name,
                head_sha=self.config.sha,
                output=CheckRunOutput(
                    title=OUTPUT_TITLE,
                    summary=summary,
                    annotations=batch,
                ),
            )
            batches += 1
            log.info(
                "Uploaded batch %d (%d annotation(s)) to check run %s",
                batches,
                len(batch),
                check_run.id,
            )

        return batches
