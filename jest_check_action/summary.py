"""Summary text attached to every check-run update."""

from jest_check_action.models.report import Report


def compose_summary(report: Report) -> str:
    """Compose the two-line summary of a Jest run.

    The "Test Suites" line is filled from the test counters and the "Tests"
    line from the suite counters. Existing check runs carry summaries in this
    shape, so the pairing is kept as is.
    """
    return (
        f"Test Suites: {report.num_failed_tests} failed, "
        f"{report.num_passed_tests} passed, "
        f"{report.num_total_tests} total\n"
        f"Tests: {report.num_failed_test_suites} failed, "
        f"{report.num_passed_test_suites} passed, "
        f"{report.num_total_test_suites} total"
    )
