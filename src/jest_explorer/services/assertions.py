"""Assertion -> test node mapping."""

from __future__ import annotations

from typing import Protocol

from jest_explorer.constants import NO_NAME_LABEL
from jest_explorer.models import (
    JestAssertionResults,
    JestFileResults,
    TestAssertionStatus,
    TestNode,
    TestReconcilationState,
)

from .identifiers import build_test_id


class StatusReconciler(Protocol):
    """Anything that can report prior assertion statuses for a file."""

    def assertions_for_test_file(self, file_name: str) -> list[TestAssertionStatus] | None: ...


def get_assertion_status(
    result: JestAssertionResults,
    file_name: str,
    reconciler: StatusReconciler | None = None,
) -> TestAssertionStatus | None:
    """Look up the reconciled status of ``result``; first match by full name wins."""
    if reconciler is None:
        return None
    statuses = reconciler.assertions_for_test_file(file_name) or []
    return next((status for status in statuses if status.title == result.full_name), None)


def build_test_node(
    assertion_result: JestAssertionResults,
    file_result: JestFileResults,
    reconciler: StatusReconciler | None = None,
) -> TestNode:
    """Map one assertion to a test node.

    Line and skip flag come from the reconciler; without one (or without a
    matching entry) the line is unset and the test is not skipped.
    """
    status = get_assertion_status(assertion_result, file_result.name, reconciler)
    line: int | None = None
    skipped = False
    if status is not None:
        line = status.line
        skipped = status.status == TestReconcilationState.KNOWN_SKIP

    title = assertion_result.title or NO_NAME_LABEL
    return TestNode(
        id=build_test_id(file_result.name, title),
        label=title,
        file=file_result.name,
        line=line,
        skipped=skipped,
    )


__all__ = ["StatusReconciler", "build_test_node", "get_assertion_status"]
