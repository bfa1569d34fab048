"""Describe-block hierarchy for a single test file."""

from __future__ import annotations

from jest_explorer.constants import NO_NAME_LABEL
from jest_explorer.models import JestAssertionResults, JestFileResults, Node, SuiteNode

from .assertions import StatusReconciler, build_test_node
from .file_tree import build_file_tree
from .identifiers import build_test_id


def _find_or_create_suite(
    siblings: list[Node], node_id: str, label: str, file_name: str
) -> SuiteNode:
    for node in siblings:
        if node.id == node_id and isinstance(node, SuiteNode):
            return node
    suite = SuiteNode(id=node_id, label=label, file=file_name)
    siblings.append(suite)
    return suite


def build_describe_tree(
    file_result: JestFileResults,
    assertions: list[JestAssertionResults],
    reconciler: StatusReconciler | None = None,
) -> list[Node]:
    """Fold assertions into nested suites keyed by their ancestor chain.

    Assertions sharing a chain prefix share the suites for that prefix; a
    suite is created the first time its prefix is seen.
    """
    tree: list[Node] = []
    for assertion in assertions:
        level = tree
        for depth, ancestor_title in enumerate(assertion.ancestor_titles):
            chain_name = " ".join(assertion.ancestor_titles[: depth + 1])
            suite = _find_or_create_suite(
                level,
                build_test_id(file_result.name, chain_name),
                ancestor_title or NO_NAME_LABEL,
                file_result.name,
            )
            level = suite.children
        level.append(build_test_node(assertion, file_result, reconciler))
    return tree


def build_file_result_tree(
    file_result: JestFileResults,
    work_dir: str,
    reconciler: StatusReconciler | None = None,
) -> SuiteNode:
    """Build the directory + describe tree for one file's results.

    Tests without ancestors come first, followed by the describe suites.
    """
    grouped = [a for a in file_result.assertion_results if a.ancestor_titles]
    ungrouped = [a for a in file_result.assertion_results if not a.ancestor_titles]

    test_cases: list[Node] = [build_test_node(a, file_result, reconciler) for a in ungrouped]
    test_suites = build_describe_tree(file_result, grouped, reconciler)

    return build_file_tree(file_result.name, work_dir, test_cases + test_suites)


__all__ = ["build_describe_tree", "build_file_result_tree"]
