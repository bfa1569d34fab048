"""Identifier construction and the reverse mapping to runner filters.

Identifiers are the merge key for tree nodes and the payload the explorer sends
back when the user runs a selection:

    <escaped file>##^<escaped test name>$

lowercased so that ``X.ts``/``x.ts`` collapse to one node.
"""

from __future__ import annotations

import re

from jest_explorer.constants import DESCRIBE_ID_SEPARATOR, ROOT_ID, TEST_ID_SEPARATOR
from jest_explorer.models import JestAssertionResults, TestFilter

from .escaping import escape_pattern

_DRIVE_LETTER = re.compile(r"^([a-zA-Z]):\\")
_ID_SEPARATORS = re.compile(f"{re.escape(TEST_ID_SEPARATOR)}|{re.escape(DESCRIBE_ID_SEPARATOR)}")


def build_test_id(file_name: str, test_name: str) -> str:
    """Build the case-insensitive identifier of a test or describe block."""
    return f"{escape_pattern(file_name)}{TEST_ID_SEPARATOR}^{escape_pattern(test_name)}$".lower()


def build_assertion_id(result: JestAssertionResults) -> str:
    """Anchored pattern matching exactly the assertion's full name."""
    return f"^{escape_pattern(result.full_name)}$"


def build_full_test_id(result: JestAssertionResults, file_name: str) -> str:
    """Build the human-readable identifier of an assertion.

    The drive letter of Windows paths is lowercased since the runner does not
    report it consistently. Nothing is escaped.

    Args:
        result: Assertion whose ancestor chain and title make up the test part.
        file_name: Path of the file the assertion belongs to.

    Returns:
        ``file::Describe::Nested##title``, or ``file##title`` without ancestors.
    """
    file_name = _DRIVE_LETTER.sub(lambda match: match.group(0).lower(), file_name)
    describe_blocks = ""
    if result.ancestor_titles:
        describe_blocks = DESCRIBE_ID_SEPARATOR + DESCRIBE_ID_SEPARATOR.join(result.ancestor_titles)
    return f"{file_name}{describe_blocks}{TEST_ID_SEPARATOR}{result.title}"


def parse_ids_to_filter(test_ids: list[str]) -> TestFilter | None:
    """Turn identifiers selected in the explorer into runner filter patterns.

    Returns ``None`` when the root node is selected, meaning "run everything".
    The first segment of each identifier is a file fragment; the last segment,
    if there is more than one, is a test-name fragment. Fragments are
    deduplicated in first-seen order, escaped, and joined into one
    alternation group per pattern.
    """
    if test_ids and test_ids[0] == ROOT_ID:
        return None

    file_names: list[str] = []
    test_names: list[str] = []
    for test_id in test_ids:
        file_name, *rest = _ID_SEPARATORS.split(test_id)
        if file_name not in file_names:
            file_names.append(file_name)
        if rest and rest[-1] not in test_names:
            test_names.append(rest[-1])

    return TestFilter(
        test_file_name_pattern=_alternation(file_names),
        test_name_pattern=_alternation(test_names) if test_names else None,
    )


def _alternation(fragments: list[str]) -> str:
    return "(" + "|".join(escape_pattern(fragment) for fragment in fragments) + ")"


__all__ = [
    "build_assertion_id",
    "build_full_test_id",
    "build_test_id",
    "parse_ids_to_filter",
]
