"""Sample payloads for common usage patterns."""

from __future__ import annotations

from jest_explorer.models import (
    ItBlock,
    JestAssertionResults,
    JestFileResults,
    JestResponse,
    JestTotalResults,
    Location,
    ParseResult,
)

SAMPLE_WORK_DIR = "/home/dev/shop"


def math_file_results() -> JestFileResults:
    """A file with a nested describe chain and one top-level test."""

    name = f"{SAMPLE_WORK_DIR}/src/utils/math.test.ts"
    return JestFileResults(
        name=name,
        status="failed",
        assertion_results=[
            JestAssertionResults(
                title="is defined",
                full_name="is defined",
                status="passed",
                location=Location(line=3),
            ),
            JestAssertionResults(
                title="adds",
                full_name="Math sum adds",
                ancestor_titles=["Math", "sum"],
                status="passed",
                location=Location(line=7),
            ),
            JestAssertionResults(
                title="handles negatives",
                full_name="Math sum handles negatives",
                ancestor_titles=["Math", "sum"],
                status="failed",
                location=Location(line=11),
                failure_messages=["Error: expect(received).toBe(expected)\n\nExpected: -2\nReceived: 2"],
            ),
            JestAssertionResults(
                title="rounds",
                full_name="Math round rounds",
                ancestor_titles=["Math", "round"],
                status="pending",
                location=Location(line=17),
            ),
        ],
    )


def cart_file_results() -> JestFileResults:
    """A sibling file in another directory under ``src``."""

    name = f"{SAMPLE_WORK_DIR}/src/cart/cart.test.ts"
    return JestFileResults(
        name=name,
        status="passed",
        assertion_results=[
            JestAssertionResults(
                title="starts empty",
                full_name="Cart starts empty",
                ancestor_titles=["Cart"],
                status="passed",
                location=Location(line=4),
            ),
        ],
    )


def sample_total_results() -> JestTotalResults:
    return JestTotalResults(
        test_results=[math_file_results(), cart_file_results()],
    )


def sample_response() -> JestResponse:
    """Convenience helper wrapping the bundled results."""

    return JestResponse(results=sample_total_results())


def sample_parse_results() -> list[ParseResult]:
    """Static parse of the bundled files plus one file with no tests."""

    math_file = f"{SAMPLE_WORK_DIR}/src/utils/math.test.ts"
    cart_file = f"{SAMPLE_WORK_DIR}/src/cart/cart.test.ts"
    return [
        ParseResult(
            file=math_file,
            it_blocks=[
                ItBlock(name="is defined", file=math_file, start=Location(line=3)),
                ItBlock(name="adds", file=math_file, start=Location(line=7)),
            ],
        ),
        ParseResult(
            file=cart_file,
            it_blocks=[ItBlock(name="starts empty", file=cart_file, start=Location(line=4))],
        ),
        ParseResult(file=f"{SAMPLE_WORK_DIR}/src/empty.test.ts"),
    ]


__all__ = [
    "SAMPLE_WORK_DIR",
    "cart_file_results",
    "math_file_results",
    "sample_parse_results",
    "sample_response",
    "sample_total_results",
]
