from __future__ import annotations

from jest_explorer.models import (
    JestAssertionResults,
    JestFileResults,
    JestResponse,
    JestTotalResults,
    Node,
    SuiteNode,
)


def make_assertion(title: str, *ancestors: str, **fields: object) -> JestAssertionResults:
    full_name = " ".join([*ancestors, title])
    return JestAssertionResults(title=title, full_name=full_name, ancestor_titles=list(ancestors), **fields)


def make_file(name: str, *assertions: JestAssertionResults) -> JestFileResults:
    return JestFileResults(name=name, assertion_results=list(assertions))


def make_response(*file_results: JestFileResults) -> JestResponse:
    return JestResponse(results=JestTotalResults(test_results=list(file_results)))


def labels(nodes: list[Node]) -> list[str]:
    return [node.label for node in nodes]


def child(node: SuiteNode, label: str) -> Node:
    matches = [c for c in node.children if c.label == label]
    assert len(matches) == 1, f"expected one {label!r} under {node.label!r}, got {labels(node.children)}"
    return matches[0]
