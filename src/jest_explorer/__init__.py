"""Public package exports."""

from jest_explorer.models import JestResponse, ParseResult, SuiteNode, TestFilter, TestNode
from jest_explorer.services import (
    TestReconciler,
    map_assertion_to_decoration,
    map_parse_to_tree,
    map_result_to_tree,
    parse_ids_to_filter,
)


__all__ = [
    "JestResponse",
    "ParseResult",
    "SuiteNode",
    "TestFilter",
    "TestNode",
    "TestReconciler",
    "main",
    "map_assertion_to_decoration",
    "map_parse_to_tree",
    "map_result_to_tree",
    "parse_ids_to_filter",
]


def main() -> None:
    """CLI entrypoint."""
    from jest_explorer.cli import main as cli_main

    cli_main()
