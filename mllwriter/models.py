"""
Data models for mllwriter.
Configuration and document trees use Pydantic for validation.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class OutputFormat(str, Enum):
    """Supported output formats."""
    HTML = "html"
    XML = "xml"
    JSON = "json"

    @classmethod
    def from_path(cls, path: str) -> Optional["OutputFormat"]:
        """Guess the format from a file extension, None if unknown."""
        suffix = Path(path).suffix.lower()
        return {
            ".html": cls.HTML,
            ".htm": cls.HTML,
            ".xml": cls.XML,
            ".json": cls.JSON,
        }.get(suffix)


class Node(BaseModel):
    """
    One node of a document tree.

    Exactly one kind per node:
    - comment node: only `comment` set
    - text node: only `text` set
    - element node: `tag` set, with optional properties and children
    """
    tag: Optional[str] = None
    single: bool = False
    properties: Dict[str, Any] = Field(default_factory=dict)
    comment: Optional[str] = None
    text: Optional[str] = None
    children: List["Node"] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_kind(self) -> "Node":
        kinds = [self.tag is not None, self.comment is not None, self.text is not None]
        if sum(kinds) != 1:
            raise ValueError("a node needs exactly one of 'tag', 'comment' or 'text'")
        if self.tag is None and (self.properties or self.children or self.single):
            raise ValueError("only element nodes can have properties, children or 'single'")
        if self.single and self.children:
            raise ValueError(f"single tag '{self.tag}' cannot have children")
        return self

    @property
    def is_element(self) -> bool:
        return self.tag is not None


class WriterConfig(BaseModel):
    """Configuration for rendering and writing documents."""

    # Indent step sizes per writer type
    html_indent_step_size: int = 4
    xml_indent_step_size: int = 2
    json_indent_step_size: int = 2

    # Output
    output_file: Optional[str] = None
    format: Optional[OutputFormat] = None
    encoding: str = "utf-8"
    trailing_newline: bool = True
    declaration: bool = False

    # Generation stamp
    stamp: bool = False
    timezone: str = "America/Chicago"

    # Debug
    debug_mode: bool = False
    debug_log_file: str = "./debug/debug.log"

    @field_validator("html_indent_step_size", "xml_indent_step_size", "json_indent_step_size")
    @classmethod
    def check_indent(cls, value: int) -> int:
        if value < 0:
            raise ValueError("indent step size cannot be negative")
        return value

    def indent_step_size(self, output_format: OutputFormat) -> int:
        """Configured indent step size for a format."""
        return getattr(self, f"{OutputFormat(output_format).value}_indent_step_size")
