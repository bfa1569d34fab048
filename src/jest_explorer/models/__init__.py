"""Models for Jest payloads and explorer trees."""

from .jest import (
    AssertionStatus,
    ItBlock,
    JestAssertionResults,
    JestFileResults,
    JestResponse,
    JestTotalResults,
    Location,
    ParseResult,
)
from .nodes import Node, SuiteNode, TestDecoration, TestFilter, TestNode
from .status import TestAssertionStatus, TestFileAssertionStatus, TestReconcilationState

__all__ = [
    "AssertionStatus",
    "ItBlock",
    "JestAssertionResults",
    "JestFileResults",
    "JestResponse",
    "JestTotalResults",
    "Location",
    "Node",
    "ParseResult",
    "SuiteNode",
    "TestAssertionStatus",
    "TestDecoration",
    "TestFileAssertionStatus",
    "TestFilter",
    "TestNode",
    "TestReconcilationState",
]
