"""Directory hierarchy for a single test file."""

from __future__ import annotations

import re

from jest_explorer.models import Node, SuiteNode

from .escaping import escape_pattern


def build_file_tree(file_path: str, work_dir: str, leaf_children: list[Node]) -> SuiteNode:
    """Wrap a file's nodes in one suite per directory below ``work_dir``.

    Directory suites are identified by their bare segment name, so files in
    the same directory produce identical wrappers that :func:`merge` collapses.

    Args:
        file_path: Path of the test file as reported by the runner.
        work_dir: Prefix removed (case-insensitively) before splitting.
        leaf_children: Nodes already built for the file.

    Returns:
        The outermost directory suite, or the file suite itself when the file
        sits directly under ``work_dir``.
    """
    separator = "/" if "/" in file_path else "\\"
    relative = re.sub(escape_pattern(work_dir), "", file_path, flags=re.IGNORECASE) if work_dir else file_path
    segments = relative.split(separator)

    file_name = segments[-1]
    node = SuiteNode(id=file_name, label=file_name, file=file_path, children=leaf_children)

    for segment in reversed(segments[:-1]):
        if segment == "":
            continue
        node = SuiteNode(id=segment, label=segment, children=[node])
    return node


__all__ = ["build_file_tree"]
