"""Models for the payloads produced by the Jest runner and its static parser.

These validate ``jest --json`` output directly. Only the fields the mappers read
are declared; everything else in the payload is ignored.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _RunnerPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class AssertionStatus(StrEnum):
    """Per-assertion status reported by Jest."""

    PASSED = "passed"
    FAILED = "failed"
    PENDING = "pending"
    SKIPPED = "skipped"
    TODO = "todo"
    DISABLED = "disabled"


class Location(_RunnerPayload):
    line: int


class JestAssertionResults(_RunnerPayload):
    """One assertion (``it``/``test`` call) inside a test file."""

    title: str = Field(description="Title of the test itself.")
    full_name: str = Field(description="Ancestor titles and title joined with spaces.")
    ancestor_titles: list[str] = Field(
        default_factory=list,
        description="Enclosing describe-block titles, outermost first.",
    )
    status: str | None = Field(default=None, description="Raw Jest status string.")
    location: Location | None = None
    failure_messages: list[str] = Field(default_factory=list)


class JestFileResults(_RunnerPayload):
    """Results for one test file."""

    name: str = Field(description="Absolute path of the test file.")
    assertion_results: list[JestAssertionResults] = Field(default_factory=list)
    status: str | None = None
    message: str = ""


class JestTotalResults(_RunnerPayload):
    """Top-level object printed by ``jest --json``."""

    test_results: list[JestFileResults] = Field(default_factory=list)


class JestResponse(_RunnerPayload):
    """Envelope handed over by the process that ran Jest."""

    results: JestTotalResults


class ItBlock(_RunnerPayload):
    """A test block found by static parsing."""

    name: str | None = None
    file: str
    start: Location


class ParseResult(_RunnerPayload):
    """Static parse output for one test file."""

    file: str
    it_blocks: list[ItBlock] = Field(default_factory=list)


__all__ = [
    "AssertionStatus",
    "ItBlock",
    "JestAssertionResults",
    "JestFileResults",
    "JestResponse",
    "JestTotalResults",
    "Location",
    "ParseResult",
]
