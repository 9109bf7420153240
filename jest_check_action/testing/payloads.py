"""Payload helpers for Jest reports and GitHub API responses in tests."""

from collections.abc import Sequence
from typing import Any


def assertion_result(
    *,
    full_name: str = "math adds numbers",
    status: str = "failed",
    failure_messages: Sequence[str] = ("Error: expect(received).toBe(expected)",),
    line: int | None = 12,
    column: int = 5,
) -> dict[str, Any]:
    """Create an assertion result payload as emitted by ``jest --json``."""
    title = full_name.rsplit(" ", 1)[-1]
    return {
        "ancestorTitles": full_name.split(" ")[:-1],
        "duration": 3,
        "failureDetails": [],
        "failureMessages": list(failure_messages),
        "fullName": full_name,
        "invocations": 1,
        "location": None if line is None else {"line": line, "column": column},
        "numPassingAsserts": 0,
        "retryReasons": [],
        "status": status,
        "title": title,
    }


def file_result(
    *,
    name: str = "/home/runner/work/app/app/src/math.test.js",
    status: str = "failed",
    message: str = "",
    assertion_results: Sequence[dict[str, Any]] = (),
) -> dict[str, Any]:
    """Create a per-file test result payload."""
    return {
        "assertionResults": list(assertion_results),
        "endTime": 4102488001000,
        "message": message,
        "name": name,
        "startTime": 4102488000000,
        "status": status,
        "summary": "",
    }


def report(
    *,
    success: bool = False,
    num_failed_tests: int = 1,
    num_passed_tests: int = 0,
    num_total_tests: int = 1,
    num_failed_test_suites: int = 1,
    num_passed_test_suites: int = 0,
    num_total_test_suites: int = 1,
    test_results: Sequence[dict[str, Any]] = (),
) -> dict[str, Any]:
    """Create a top-level Jest report payload."""
    return {
        "numFailedTestSuites": num_failed_test_suites,
        "numFailedTests": num_failed_tests,
        "numPassedTestSuites": num_passed_test_suites,
        "numPassedTests": num_passed_tests,
        "numPendingTestSuites": 0,
        "numPendingTests": 0,
        "numRuntimeErrorTestSuites": 0,
        "numTodoTests": 0,
        "numTotalTestSuites": num_total_test_suites,
        "numTotalTests": num_total_tests,
        "openHandles": [],
        "snapshot": {"added": 0, "failure": False, "total": 0},
        "startTime": 4102488000000,
        "success": success,
        "testResults": list(test_results),
        "wasInterrupted": False,
    }


def check_run(
    *,
    check_run_id: int = 4242,
    name: str = "jest",
    head_sha: str = "abc123def456",
    status: str = "in_progress",
) -> dict[str, Any]:
    """Create a check run payload for testing.

    Returns a realistic GitHub check run API response structure.
    """
    return {
        "id": check_run_id,
        "head_sha": head_sha,
        "node_id": "CR_kwDOAbcdef8AAAAB",
        "external_id": "",
        "url": (
            "https://api.github.com/repos/test-owner/test-repo"
            f"/check-runs/{check_run_id}"
        ),
        "html_url": f"https://github.com/test-owner/test-repo/runs/{check_run_id}",
        "details_url": "https://github.com/test-owner/test-repo/actions",
        "status": status,
        "conclusion": None,
        "started_at": "2099-01-01T12:00:00Z",
        "completed_at": None,
        "output": {
            "title": None,
            "summary": None,
            "text": None,
            "annotations_count": 0,
            "annotations_url": (
                "https://api.github.com/repos/test-owner/test-repo"
                f"/check-runs/{check_run_id}/annotations"
            ),
        },
        "name": name,
        "check_suite": {"id": 5},
        "app": {"id": 15368, "slug": "github-actions", "name": "GitHub Actions"},
        "pull_requests": [],
    }


def check_runs_response(
    *,
    check_runs: Sequence[dict[str, Any]] = (),
) -> dict[str, Any]:
    """Create a list check runs for a ref response."""
    return {
        "total_count": len(check_runs),
        "check_runs": list(check_runs),
    }
