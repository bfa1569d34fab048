"""Tree node models consumed by the test explorer UI."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ExplorerModel(BaseModel):
    """Base for models emitted to the explorer (camelCase on the wire)."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the shape the explorer expects."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SuiteNode(_ExplorerModel):
    """A grouping node: directory, test file, or describe block."""

    type: Literal["suite"] = "suite"
    id: str = Field(description="Merge key; unique among merged siblings.")
    label: str = Field(description="Text shown in the explorer.")
    file: str | None = Field(default=None, description="Source file, when the suite maps to one.")
    children: list[Node] = Field(
        default_factory=list,
        description="Child nodes in first-seen order.",
    )


class TestNode(_ExplorerModel):
    """A single test case. Test nodes never have children."""

    __test__ = False

    type: Literal["test"] = "test"
    id: str = Field(description="Identifier built from the file and test name.")
    label: str = Field(description="Raw test title.")
    file: str | None = Field(default=None, description="Source file of the test.")
    line: int | None = Field(default=None, description="Source line, when resolved.")
    skipped: bool = Field(default=False, description="True when the runner skipped the test.")


Node = Annotated[SuiteNode | TestNode, Field(discriminator="type")]

SuiteNode.model_rebuild()


class TestDecoration(_ExplorerModel):
    """Editor gutter annotation for one assertion."""

    __test__ = False

    line: int = 0
    message: str = ""


class TestFilter(_ExplorerModel):
    """Runner-level filter patterns rebuilt from selected identifiers.

    ``test_name_pattern`` is ``None`` when only files were selected.
    """

    __test__ = False

    test_file_name_pattern: str
    test_name_pattern: str | None = None


__all__ = ["Node", "SuiteNode", "TestDecoration", "TestFilter", "TestNode"]
