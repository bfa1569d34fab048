"""Pattern escaping for identifiers and runner filters."""

import re

# JavaScript RegExp metacharacters; the runner consumes the escaped text.
_PATTERN_METACHARACTERS = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_pattern(text: str) -> str:
    """Return ``text`` with pattern metacharacters backslash-escaped.

    The result is safe to embed verbatim in both Python ``re`` patterns and
    the runner's ``--testNamePattern`` / ``--testPathPattern`` flags.
    """
    return _PATTERN_METACHARACTERS.sub(lambda match: "\\" + match.group(0), text)
