"""In-memory status reconciler fed from ``jest --json`` results."""

from __future__ import annotations

import logging
import re

from jest_explorer.models import (
    AssertionStatus,
    JestAssertionResults,
    JestFileResults,
    JestTotalResults,
    TestAssertionStatus,
    TestFileAssertionStatus,
    TestReconcilationState,
)

logger = logging.getLogger(__name__)

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

_STATE_BY_STATUS: dict[str, TestReconcilationState] = {
    AssertionStatus.PASSED: TestReconcilationState.KNOWN_SUCCESS,
    AssertionStatus.FAILED: TestReconcilationState.KNOWN_FAIL,
    AssertionStatus.PENDING: TestReconcilationState.KNOWN_SKIP,
    AssertionStatus.SKIPPED: TestReconcilationState.KNOWN_SKIP,
    AssertionStatus.DISABLED: TestReconcilationState.KNOWN_SKIP,
    AssertionStatus.TODO: TestReconcilationState.KNOWN_TODO,
}


def _state_for(status: str | None) -> TestReconcilationState:
    if status is None:
        return TestReconcilationState.UNKNOWN
    return _STATE_BY_STATUS.get(status, TestReconcilationState.UNKNOWN)


def _terse_message(failure_messages: list[str]) -> str | None:
    """First non-blank line of the first failure message, without colour codes."""
    if not failure_messages:
        return None
    for line in _ANSI_ESCAPE.sub("", failure_messages[0]).splitlines():
        if line.strip():
            return line.strip()
    return None


def _assertion_status(assertion: JestAssertionResults) -> TestAssertionStatus:
    return TestAssertionStatus(
        title=assertion.full_name,
        status=_state_for(assertion.status),
        line=assertion.location.line if assertion.location else None,
        message="\n".join(assertion.failure_messages),
        terse_message=_terse_message(assertion.failure_messages),
    )


def _file_state(file_result: JestFileResults, assertions: list[TestAssertionStatus]) -> TestReconcilationState:
    if file_result.status is not None:
        return _state_for(file_result.status)
    if any(a.status == TestReconcilationState.KNOWN_FAIL for a in assertions):
        return TestReconcilationState.KNOWN_FAIL
    return TestReconcilationState.KNOWN_SUCCESS if assertions else TestReconcilationState.UNKNOWN


class TestReconciler:
    """Keeps the latest reconciled assertion statuses per test file."""

    __test__ = False

    def __init__(self) -> None:
        self._files: dict[str, TestFileAssertionStatus] = {}

    def update_file_with_jest_status(self, results: JestTotalResults) -> list[TestFileAssertionStatus]:
        """Replace stored statuses for every file in ``results``.

        Returns:
            The reconciled status of each file, in result order.
        """
        updated: list[TestFileAssertionStatus] = []
        for file_result in results.test_results:
            assertions = [_assertion_status(a) for a in file_result.assertion_results]
            file_status = TestFileAssertionStatus(
                file=file_result.name,
                status=_file_state(file_result, assertions),
                message=file_result.message,
                assertions=assertions,
            )
            self._files[file_result.name] = file_status
            updated.append(file_status)
            logger.debug("Reconciled %d assertions for %s", len(assertions), file_result.name)
        return updated

    def assertions_for_test_file(self, file_name: str) -> list[TestAssertionStatus] | None:
        file_status = self._files.get(file_name)
        return file_status.assertions if file_status else None

    def state_for_test_file(self, file_name: str) -> TestReconcilationState:
        file_status = self._files.get(file_name)
        return file_status.status if file_status else TestReconcilationState.UNKNOWN

    def remove_file(self, file_name: str) -> None:
        self._files.pop(file_name, None)

    @property
    def file_names(self) -> list[str]:
        return list(self._files)


__all__ = ["TestReconciler"]
