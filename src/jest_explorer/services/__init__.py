"""Tree construction, merging and identifier services."""

from .assertions import StatusReconciler, build_test_node, get_assertion_status
from .describe_tree import build_describe_tree, build_file_result_tree
from .escaping import escape_pattern
from .file_tree import build_file_tree
from .identifiers import build_assertion_id, build_full_test_id, build_test_id, parse_ids_to_filter
from .mappers import map_assertion_to_decoration, map_parse_to_tree, map_result_to_tree
from .merge import merge
from .reconciler import TestReconciler

__all__ = [
    "StatusReconciler",
    "TestReconciler",
    "build_assertion_id",
    "build_describe_tree",
    "build_file_result_tree",
    "build_file_tree",
    "build_full_test_id",
    "build_test_id",
    "build_test_node",
    "escape_pattern",
    "get_assertion_status",
    "map_assertion_to_decoration",
    "map_parse_to_tree",
    "map_result_to_tree",
    "merge",
    "parse_ids_to_filter",
]
