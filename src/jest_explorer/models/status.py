"""Resolved assertion status as stored by a reconciler."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TestReconcilationState(StrEnum):
    """Outcome of an assertion once its result has been reconciled."""

    __test__ = False

    UNKNOWN = "Unknown"
    KNOWN_SUCCESS = "KnownSuccess"
    KNOWN_FAIL = "KnownFail"
    KNOWN_SKIP = "KnownSkip"
    KNOWN_TODO = "KnownTodo"


class TestAssertionStatus(BaseModel):
    """Status of one assertion, keyed by its full name."""

    __test__ = False

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    title: str = Field(description="Full name of the assertion (ancestors + title).")
    status: TestReconcilationState = TestReconcilationState.UNKNOWN
    line: int | None = None
    message: str = ""
    terse_message: str | None = None


class TestFileAssertionStatus(BaseModel):
    """All reconciled assertions of one test file."""

    __test__ = False

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    file: str
    status: TestReconcilationState = TestReconcilationState.UNKNOWN
    message: str = ""
    assertions: list[TestAssertionStatus] = Field(default_factory=list)


__all__ = ["TestAssertionStatus", "TestFileAssertionStatus", "TestReconcilationState"]
