"""Top-level mappers from runner payloads to explorer trees."""

from __future__ import annotations

import logging

from jest_explorer.constants import NO_NAME_LABEL, ROOT_ID, ROOT_LABEL
from jest_explorer.models import (
    JestAssertionResults,
    JestResponse,
    Node,
    ParseResult,
    SuiteNode,
    TestDecoration,
    TestNode,
)

from .assertions import StatusReconciler, get_assertion_status
from .describe_tree import build_file_result_tree
from .file_tree import build_file_tree
from .identifiers import build_test_id
from .merge import merge

logger = logging.getLogger(__name__)


def _root(children: list[Node]) -> SuiteNode:
    return SuiteNode(id=ROOT_ID, label=ROOT_LABEL, children=merge([], children))


def map_result_to_tree(
    response: JestResponse,
    work_dir: str,
    reconciler: StatusReconciler | None = None,
) -> SuiteNode:
    """Map post-run results to a single tree rooted at the ``root`` suite."""
    file_trees = [
        build_file_result_tree(file_result, work_dir, reconciler)
        for file_result in response.results.test_results
    ]
    logger.debug("Mapped %d result files under %s", len(file_trees), work_dir)
    return _root(file_trees)


def _parse_result_tree(parse_result: ParseResult, work_dir: str) -> SuiteNode | None:
    file_name: str | None = None
    test_cases: list[Node] = []
    for it_block in parse_result.it_blocks:
        file_name = it_block.file
        test_name = it_block.name or NO_NAME_LABEL
        test_cases.append(
            TestNode(
                id=build_test_id(file_name, test_name),
                label=test_name,
                file=file_name,
                line=it_block.start.line,
                skipped=False,
            )
        )
    if not file_name:
        return None
    return build_file_tree(file_name, work_dir, test_cases)


def map_parse_to_tree(parsed_files: list[ParseResult], work_dir: str) -> SuiteNode:
    """Map static parse results to a tree; files without test blocks are dropped."""
    file_trees: list[Node] = []
    for parse_result in parsed_files:
        tree = _parse_result_tree(parse_result, work_dir)
        if tree is None:
            logger.debug("No test blocks found in %s, skipping", parse_result.file)
            continue
        file_trees.append(tree)
    return _root(file_trees)


def map_assertion_to_decoration(
    result: JestAssertionResults,
    file_name: str,
    reconciler: StatusReconciler | None = None,
) -> list[TestDecoration]:
    """Zero or one gutter decoration for an assertion."""
    status = get_assertion_status(result, file_name, reconciler)
    if status is None:
        return []
    return [TestDecoration(line=status.line or 0, message=status.terse_message or "")]


__all__ = ["map_assertion_to_decoration", "map_parse_to_tree", "map_result_to_tree"]
