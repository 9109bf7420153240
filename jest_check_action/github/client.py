"""Client for the GitHub check runs API."""

import json
import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from pydantic import ValidationError

from jest_check_action.config import ActionConfig
from jest_check_action.github.models import CheckRun, CheckRunOutput, CheckRunsResponse

log = logging.getLogger(__name__)


class CheckRunApiError(RuntimeError):
    """Raised when the checks API answers with an unexpected status."""


@dataclass(frozen=True, kw_only=True)
class ChecksClient:
    """Bearer-token authenticated client for check runs of one repository."""

    config: ActionConfig
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ActionConfig
    ) -> AsyncGenerator["ChecksClient", None]:
        """Create client with managed session lifecycle."""
        headers = {
            "Authorization": f"Bearer {config.token.get_secret_value()}",
            "Accept": "application/vnd.github+json",
        }
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    async def list_check_runs_for_ref(self, ref: str) -> Sequence[CheckRun]:
        """List the check runs attached to a commit SHA, branch or tag."""
        url = (
            f"/repos/{self.config.owner}/{self.config.repo}"
            f"/commits/{ref}/check-runs"
        )

        async with self.session.get(url) as response:
            if response.status != 200:
                text = await response.text()
                raise CheckRunApiError(
                    f"Failed to list check runs: {response.status} {text}"
                )
            try:
                data = await response.json()
            except json.JSONDecodeError as e:
                raise CheckRunApiError(f"Malformed check runs response: {e}") from e

        try:
            return CheckRunsResponse.model_validate(data).check_runs
        except ValidationError as e:
            raise CheckRunApiError(f"Unexpected check runs response: {e}") from e

    async def update_check_run(
        self,
        check_run_id: int,
        *,
        name: str,
        head_sha: str,
        output: CheckRunOutput,
    ) -> None:
        """Update the name, head SHA and output of a check run."""
        url = (
            f"/repos/{self.config.owner}/{self.config.repo}"
            f"/check-runs/{check_run_id}"
        )
        payload = {
            "name": name,
            "head_sha": head_sha,
            "output": output.model_dump(mode="json"),
        }

        log.debug(
            "Updating check run: id=%s, name=%s, annotations=%d",
            check_run_id,
            name,
            len(output.annotations),
        )

        async with self.session.patch(url, json=payload) as response:
            if response.status != 200:
                text = await response.text()
                raise CheckRunApiError(
                    f"Failed to update check run {check_run_id}: "
                    f"{response.status} {text}"
                )
