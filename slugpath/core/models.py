"""Domain models for content records and their output mappings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_INDEX_NAME = "index.html"


def check_index_name(value: str) -> str:
    """Validate a filename used as the directory index.

    Args:
        value: Candidate filename

    Returns:
        The filename, unchanged
    """
    if not value or "/" in value:
        raise ValueError(f"Index name must be a bare filename, got: {value!r}")
    if value.startswith(".") or "." not in value:
        raise ValueError(f"Index name must have an extension, got: {value!r}")
    return value


class ContentDescriptor(BaseModel):
    """A content record as authored in the content list."""

    model_config = ConfigDict(frozen=True)

    slug: str = Field(..., description="Author-supplied output location")
    template_source: Path = Field(..., description="Template file path")
    context: Any = Field(default_factory=dict, description="Opaque render context")


class OutputMapping(BaseModel):
    """A template paired with the concrete file it renders to."""

    model_config = ConfigDict(frozen=True)

    template_source: Path = Field(..., description="Template file path")
    destination_path: Path = Field(..., description="Output file path")
    context: Any = Field(default_factory=dict, description="Opaque render context")

    @classmethod
    def from_descriptor(
        cls, descriptor: ContentDescriptor, destination_path: Path
    ) -> OutputMapping:
        return cls(
            template_source=descriptor.template_source,
            destination_path=destination_path,
            context=descriptor.context,
        )


class BuildConfig(BaseModel):
    """Everything the planner needs for one build invocation."""

    descriptors: list[ContentDescriptor] = Field(
        default_factory=list, description="Content records, in authored order"
    )
    build_root: Path = Field(..., description="Absolute output directory")
    index_name: str = Field(
        default=DEFAULT_INDEX_NAME, description="Filename written for directories"
    )

    @field_validator("build_root")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        return value.expanduser().absolute()

    @field_validator("index_name")
    @classmethod
    def _valid_index_name(cls, value: str) -> str:
        return check_index_name(value)
