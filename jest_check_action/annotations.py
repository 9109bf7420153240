"""Translation of failed Jest results into check-run annotations."""

from collections.abc import Sequence

from jest_check_action.github.models import Annotation
from jest_check_action.models.report import AssertionResult, Report, TestResult

PASSED = "passed"
SUITE_ERROR_TITLE = "Test Suite Error"


def relative_path(file_path: str, workspace: str) -> str:
    """Strip the ``<workspace>/`` prefix from an absolute test file path."""
    return file_path.removeprefix(f"{workspace}/")


def build_annotations(report: Report, workspace: str) -> Sequence[Annotation]:
    """Build one annotation per failed assertion.

    Test files that failed without reporting any assertion (for example a
    syntax error that prevented the suite from running) get a single
    annotation on their first line carrying the suite-level message.

    Args:
        report: Decoded Jest report
        workspace: Checkout directory stripped from test file paths

    Returns:
        Annotations in report order

    """
    annotations: list[Annotation] = []

    for test_result in report.test_results:
        if test_result.status == PASSED:
            continue

        path = relative_path(test_result.file_path, workspace)

        if test_result.assertion_results:
            annotations.extend(
                assertion_annotation(path, assertion)
                for assertion in test_result.assertion_results
                if assertion.status != PASSED
            )
        else:
            annotations.append(suite_error_annotation(path, test_result))

    return annotations


def assertion_annotation(path: str, assertion: AssertionResult) -> Annotation:
    """Annotate a failed assertion at its own line."""
    messages = list(assertion.failure_messages) or [assertion.full_name]
    # The API rejects lines below 1; Jest omits locations unless asked for them
    line = assertion.location.line if assertion.location else 0
    line = max(line, 1)

    return Annotation(
        path=path,
        start_line=line,
        end_line=line,
        annotation_level="failure",
        title=assertion.full_name,
        message="\n\n".join(messages),
    )


def suite_error_annotation(path: str, test_result: TestResult) -> Annotation:
    """Annotate a test file that failed before running any assertion."""
    return Annotation(
        path=path,
        start_line=1,
        end_line=1,
        annotation_level="failure",
        title=SUITE_ERROR_TITLE,
        message=test_result.message,
    )
