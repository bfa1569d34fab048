from __future__ import annotations

from jest_explorer.constants import DESCRIBE_ID_SEPARATOR, TEST_ID_SEPARATOR
from jest_explorer.services import (
    build_assertion_id,
    build_full_test_id,
    build_test_id,
    escape_pattern,
    parse_ids_to_filter,
)
from tests.helpers import make_assertion


def test_escape_pattern_escapes_only_metacharacters() -> None:
    assert escape_pattern("a.b*c+d?e^f$g{h}i(j)k|l[m]n\\o") == (
        "a\\.b\\*c\\+d\\?e\\^f\\$g\\{h\\}i\\(j\\)k\\|l\\[m\\]n\\\\o"
    )
    assert escape_pattern("plain name-with #chars") == "plain name-with #chars"


def test_build_test_id_shape() -> None:
    assert build_test_id("src/a.test.ts", "adds (1 + 2)") == "src/a\\.test\\.ts##^adds \\(1 \\+ 2\\)$"


def test_build_test_id_is_case_insensitive() -> None:
    assert build_test_id("X.ts", "Foo") == build_test_id("x.ts", "foo")


def test_build_test_id_distinguishes_files_and_names() -> None:
    assert build_test_id("a.ts", "t1") != build_test_id("b.ts", "t1")
    assert build_test_id("a.ts", "t1") != build_test_id("a.ts", "t2")


def test_build_assertion_id_anchors_full_name() -> None:
    assertion = make_assertion("adds", "Math", "sum")
    assert build_assertion_id(assertion) == "^Math sum adds$"
    assert build_assertion_id(make_assertion("a.b")) == "^a\\.b$"


def test_build_full_test_id_joins_describe_chain() -> None:
    assertion = make_assertion("adds", "Math", "sum")
    expected = f"/src/m.ts{DESCRIBE_ID_SEPARATOR}Math{DESCRIBE_ID_SEPARATOR}sum{TEST_ID_SEPARATOR}adds"
    assert build_full_test_id(assertion, "/src/m.ts") == expected


def test_build_full_test_id_without_ancestors() -> None:
    assert build_full_test_id(make_assertion("adds"), "/src/m.ts") == f"/src/m.ts{TEST_ID_SEPARATOR}adds"


def test_build_full_test_id_lowercases_drive_letter() -> None:
    assertion = make_assertion("Adds")
    assert build_full_test_id(assertion, "C:\\Repo\\M.ts") == f"c:\\Repo\\M.ts{TEST_ID_SEPARATOR}Adds"
    assert build_full_test_id(assertion, "CD:\\x.ts").startswith("CD:\\")


def test_parse_ids_to_filter_root_means_no_filter() -> None:
    assert parse_ids_to_filter(["root"]) is None
    assert parse_ids_to_filter(["root", "a.ts##^t1$"]) is None


def test_parse_ids_to_filter_file_and_test() -> None:
    test_filter = parse_ids_to_filter(["a.ts##^t1$"])
    assert test_filter is not None
    assert test_filter.test_file_name_pattern == "(a\\.ts)"
    assert test_filter.test_name_pattern == "(\\^t1\\$)"


def test_parse_ids_to_filter_deduplicates_in_order() -> None:
    test_filter = parse_ids_to_filter(["b.ts##t1", "a.ts##t2", "b.ts##t1", "a.ts::Outer##t2"])
    assert test_filter is not None
    assert test_filter.test_file_name_pattern == "(b\\.ts|a\\.ts)"
    assert test_filter.test_name_pattern == "(t1|t2)"


def test_parse_ids_to_filter_uses_last_describe_segment() -> None:
    test_filter = parse_ids_to_filter(["a.ts::Outer::Inner"])
    assert test_filter is not None
    assert test_filter.test_file_name_pattern == "(a\\.ts)"
    assert test_filter.test_name_pattern == "(Inner)"


def test_parse_ids_to_filter_bare_file_has_no_test_pattern() -> None:
    test_filter = parse_ids_to_filter(["math.test.ts", "src"])
    assert test_filter is not None
    assert test_filter.test_file_name_pattern == "(math\\.test\\.ts|src)"
    assert test_filter.test_name_pattern is None
    assert test_filter.to_payload() == {"testFileNamePattern": "(math\\.test\\.ts|src)"}


def test_filter_round_trips_full_test_id() -> None:
    assertion = make_assertion("adds", "Math", "sum")
    test_filter = parse_ids_to_filter([build_full_test_id(assertion, "/src/m.ts")])
    assert test_filter is not None
    assert test_filter.test_file_name_pattern == "(/src/m\\.ts)"
    assert test_filter.test_name_pattern == "(adds)"


def test_parse_ids_to_filter_empty_selection() -> None:
    test_filter = parse_ids_to_filter([])
    assert test_filter is not None
    assert test_filter.test_file_name_pattern == "()"
    assert test_filter.test_name_pattern is None
