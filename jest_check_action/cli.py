"""CLI entry point for the Jest check-run annotation action."""

import argparse
import asyncio
import logging
import sys
from collections.abc import Mapping
from pathlib import Path

import aiohttp

from jest_check_action.annotations import build_annotations
from jest_check_action.config import ActionConfig, ConfigurationError
from jest_check_action.github.client import CheckRunApiError, ChecksClient
from jest_check_action.models.report import ReportDecodeError, decode_report
from jest_check_action.publisher import AnnotationPublisher, CheckRunNotFoundError
from jest_check_action.summary import compose_summary

FATAL_ERRORS = (
    ReportDecodeError,
    ConfigurationError,
    CheckRunApiError,
    CheckRunNotFoundError,
    aiohttp.ClientError,
    TimeoutError,
)


async def publish_report(
    report_data: str | bytes, environ: Mapping[str, str] | None = None
) -> str | None:
    """Decode a Jest report and annotate the current check run with failures.

    Args:
        report_data: Jest JSON report
        environ: Environment to read configuration from (defaults to
            ``os.environ``)

    Returns:
        The summary of a failed run, or None when the run succeeded and
        nothing was published

    """
    log = logging.getLogger("jest_check_action")

    report = decode_report(report_data)
    if report.success:
        return None

    config = ActionConfig.from_env(environ)
    annotations = build_annotations(report, config.workspace)
    summary = compose_summary(report)

    log.info(
        "Publishing %d annotation(s) for %s/%s@%s",
        len(annotations),
        config.owner,
        config.repo,
        config.sha,
    )

    async with ChecksClient.from_config(config) as client:
        publisher = AnnotationPublisher(client=client, config=config)
        check_run = await publisher.resolve_check_run()
        await publisher.publish(check_run, annotations, summary)

    return summary


async def run(
    report_data: str | bytes, environ: Mapping[str, str] | None = None
) -> int:
    """Publish the report and return exit code.

    A failed test run always ends with exit code 1, after logging the summary,
    so the CI step reflects the failure once the annotations are uploaded.
    """
    log = logging.getLogger("jest_check_action")

    try:
        summary = await publish_report(report_data, environ)
    except FATAL_ERRORS as e:
        log.error("%s", e)
        return 1

    if summary is None:
        return 0

    log.error("%s", summary)
    return 1


def read_report(path: Path | None) -> bytes:
    """Read the report from ``path``, or from standard input if not given."""
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Annotate the GitHub check run with failed Jest tests"
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Path to the Jest JSON report (defaults to standard input)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        report_data = read_report(args.report)
    except OSError as e:
        logging.getLogger("jest_check_action").error("Unable to read report: %s", e)
        sys.exit(1)

    exit_code = asyncio.run(run(report_data))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
