"""Example: building explorer trees and runner filters programmatically."""

import json

from jest_explorer.examples import SAMPLE_WORK_DIR, sample_parse_results, sample_response
from jest_explorer.models import SuiteNode
from jest_explorer.services import (
    TestReconciler,
    map_assertion_to_decoration,
    map_parse_to_tree,
    map_result_to_tree,
    parse_ids_to_filter,
)


def _first_test_id(node: SuiteNode) -> str:
    for child in node.children:
        if isinstance(child, SuiteNode):
            found = _first_test_id(child)
            if found:
                return found
        else:
            return child.id
    return ""


def main():
    """Example usage of the mappers."""

    response = sample_response()

    # Reconcile statuses so the tree carries lines and skip flags
    reconciler = TestReconciler()
    reconciler.update_file_with_jest_status(response.results)

    root = map_result_to_tree(response, SAMPLE_WORK_DIR, reconciler)
    print("Post-run tree:")
    print(json.dumps(root.to_payload(), indent=2))

    static_root = map_parse_to_tree(sample_parse_results(), SAMPLE_WORK_DIR)
    print(f"\nStatic tree has {len(static_root.children)} top-level suite(s)")

    # What the explorer sends back when the user runs one test
    test_id = _first_test_id(root)
    test_filter = parse_ids_to_filter([test_id])
    print(f"\nSelected: {test_id}")
    print(f"Filter:   {test_filter.to_payload() if test_filter else None}")
    print(f"Root:     {parse_ids_to_filter(['root'])}")

    print("\nDecorations:")
    for file_result in response.results.test_results:
        for assertion in file_result.assertion_results:
            for decoration in map_assertion_to_decoration(assertion, file_result.name, reconciler):
                print(f"  {assertion.full_name}: line {decoration.line} {decoration.message}")


if __name__ == "__main__":
    main()
