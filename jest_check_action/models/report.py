"""Models for the Jest JSON test report read from standard input."""

from collections.abc import Sequence

from pydantic import Field, ValidationError

from jest_check_action.models.base import CamelModel


class ReportDecodeError(ValueError):
    """Raised when the test report cannot be decoded."""


class Location(CamelModel):
    """Source position of an assertion within its test file."""

    line: int = 0
    column: int = 0


class AssertionResult(CamelModel):
    """Outcome of a single assertion (an ``it``/``test`` block)."""

    ancestor_titles: Sequence[str] = Field(default_factory=list)
    failure_messages: Sequence[str] = Field(default_factory=list)
    full_name: str = ""
    location: Location | None = None
    status: str = ""
    title: str = ""


class TestResult(CamelModel):
    """Outcome of one test file."""

    __test__ = False

    file_path: str = Field(default="", alias="name")
    status: str = ""
    message: str = ""
    summary: str = ""
    assertion_results: Sequence[AssertionResult] = Field(default_factory=list)


class Report(CamelModel):
    """Aggregated result of a whole Jest run."""

    num_failed_tests: int = 0
    num_passed_tests: int = 0
    num_total_tests: int = 0
    num_failed_test_suites: int = 0
    num_passed_test_suites: int = 0
    num_total_test_suites: int = 0
    success: bool = False
    test_results: Sequence[TestResult] = Field(default_factory=list)


def decode_report(data: str | bytes) -> Report:
    """Decode a Jest JSON report.

    Raises:
        ReportDecodeError: If the input is not valid JSON or does not match
            the report schema

    """
    try:
        return Report.model_validate_json(data)
    except ValidationError as e:
        raise ReportDecodeError(f"Invalid test report: {e}") from e
