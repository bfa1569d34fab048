"""Forest merging by node identifier."""

from __future__ import annotations

from collections.abc import Iterable

from jest_explorer.models import Node, SuiteNode


def merge(destination: list[Node], source: Iterable[Node]) -> list[Node]:
    """Merge ``source`` into ``destination`` in place and return it.

    A suite whose id already exists as a suite in ``destination`` has its
    children merged recursively. Every other node is appended, so test nodes
    with equal ids end up as separate siblings.
    """
    for node in source:
        existing = next((candidate for candidate in destination if candidate.id == node.id), None)
        if isinstance(existing, SuiteNode) and isinstance(node, SuiteNode):
            merge(existing.children, node.children)
        else:
            destination.append(node)
    return destination


__all__ = ["merge"]
