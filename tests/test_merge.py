from __future__ import annotations

from jest_explorer.models import SuiteNode, TestNode
from jest_explorer.services import merge
from tests.helpers import labels


def _suite(node_id: str, *children) -> SuiteNode:
    return SuiteNode(id=node_id, label=node_id, children=list(children))


def _test(node_id: str) -> TestNode:
    return TestNode(id=node_id, label=node_id)


def test_matching_suites_collapse() -> None:
    destination = [_suite("src", _suite("a.ts", _test("t1")))]
    source = [_suite("src", _suite("b.ts", _test("t2")))]

    merged = merge(destination, source)

    assert merged is destination
    assert labels(merged) == ["src"]
    src = merged[0]
    assert isinstance(src, SuiteNode)
    assert labels(src.children) == ["a.ts", "b.ts"]


def test_nested_matching_suites_merge_recursively() -> None:
    destination = [_suite("src", _suite("utils", _suite("a.ts", _test("t1"))))]
    source = [_suite("src", _suite("utils", _suite("a.ts", _test("t2"))))]

    merge(destination, source)

    a_file = destination[0].children[0].children[0]
    assert isinstance(a_file, SuiteNode)
    assert labels(a_file.children) == ["t1", "t2"]


def test_disjoint_ids_concatenate_in_order() -> None:
    destination = [_suite("a"), _test("t")]
    merged = merge(destination, [_suite("b"), _suite("c")])
    assert labels(merged) == ["a", "t", "b", "c"]


def test_test_nodes_are_never_merged() -> None:
    merged = merge([_test("same")], [_test("same")])
    assert labels(merged) == ["same", "same"]


def test_suite_and_test_with_same_id_stay_separate() -> None:
    merged = merge([_test("x")], [_suite("x", _test("inner"))])
    assert [type(node) for node in merged] == [TestNode, SuiteNode]


def test_merge_into_empty_destination() -> None:
    source = [_suite("a"), _suite("a", _test("t"))]
    merged = merge([], source)

    assert labels(merged) == ["a"]
    assert labels(merged[0].children) == ["t"]
