"""
Shared writer abstraction.

Every markup-language-like document (HTML, XML, JSON) is built from blocks:
'<div>' ... '</div>' in HTML and XML, '{' ... '}' in JSON. MLLWriter describes
the behavior all writer types have in common, WriterCore holds the indent and
block bookkeeping they share by composition.
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Tuple

from .exceptions import NotationError, UnbalancedTagError


def check_notation(name: str) -> str:
    """
    Validate a tag or attribute name.

    Accepts only non-empty ASCII-alphanumeric names whose letters are lowercase.

    Returns:
        The name unchanged

    Raises:
        NotationError: if the name breaks the notation
    """
    if not name or not (name.isascii() and name.isalnum()) or name != name.lower():
        raise NotationError(name)
    return name


class Property:
    """
    Ordered collection of name/value pairs, e.g. class="superhero" and
    style="width: auto". Passed to add_properties(), which writes every pair
    in insertion order.
    """

    def __init__(self, name: str, value: str):
        self.pairs: List[Tuple[str, str]] = [(name, value)]

    def add(self, name: str, value: str):
        """Add another pair."""
        self.pairs.append((name, value))

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Property):
            return NotImplemented
        return self.pairs == other.pairs

    def __repr__(self):
        return f"Property({self.pairs!r})"


class WriterCore:
    """
    Indent and block bookkeeping common to all writer types.

    Holds:
    - indent_step_size: number of spaces one indent step means
    - indent: the current indent, kept as a string for quick insertion
    - block_stack: opened, not yet closed tags
    """

    def __init__(self, indent_step_size: int):
        self.indent_step_size = indent_step_size
        self.indent = ""
        self.block_stack: List[str] = []

    def clear(self, indent_step_size: int):
        """Reset to the given step size with zero indent and no open blocks."""
        self.indent_step_size = indent_step_size
        self.indent = ""
        self.block_stack = []

    def push(self, tag: str):
        self.block_stack.append(tag)

    def pop(self) -> str:
        """Remove and return the innermost open tag."""
        if not self.block_stack:
            raise UnbalancedTagError("close_tag() called without an open block")
        return self.block_stack.pop()

    def line_feed(self, n: int = 1) -> str:
        """Return n line feeds followed by the current indent."""
        return "\n" * n + self.indent

    def line_feed_inc(self) -> str:
        self.inc_indent_step()
        return self.line_feed(1)

    def line_feed_dec(self) -> str:
        self.dec_indent_step()
        return self.line_feed(1)

    def inc_indent_step(self):
        self.indent += " " * self.indent_step_size

    def dec_indent_step(self):
        # never below zero indent
        remaining = len(self.indent) - self.indent_step_size
        self.indent = " " * max(remaining, 0)

    def set_indent_step(self, indent_step: int):
        """Set the indent to indent_step times the current step size."""
        self.indent = " " * (indent_step * self.indent_step_size)

    def set_indent_step_size(self, indent_step_size: int):
        """
        Set the number of spaces per indent step.
        The current indent string is kept as is until the next indent change.
        """
        self.indent_step_size = indent_step_size

    def __repr__(self):
        return (
            f"WriterCore(indent_step_size={self.indent_step_size}, "
            f"indent={len(self.indent)}, block_stack={self.block_stack})"
        )


class MLLWriter(ABC):
    """
    Markup-language-like writer.

    Common behavior of HTMLWriter, XMLWriter and JSONWriter. Content is
    accumulated in the public `content` string; layout helpers (line feeds,
    indent steps) delegate to the composed WriterCore.
    """

    DEFAULT_INDENT_STEP_SIZE = 4

    def __init__(self, indent_step_size: Optional[int] = None):
        self.content = ""
        self.core = WriterCore(
            self.DEFAULT_INDENT_STEP_SIZE if indent_step_size is None else indent_step_size
        )

    # ------------------------------------------------------------------
    # Format specific operations
    # ------------------------------------------------------------------

    @abstractmethod
    def open_tag(self, tag: str):
        """Open a new block, e.g. the 'div' tag in HTML or a '{' block in JSON."""

    @abstractmethod
    def close_tag(self):
        """Close the innermost open block, e.g. '</div>' in HTML or '}' in JSON."""

    @abstractmethod
    def single_tag(self, tag: str):
        """Write a single element, e.g. 'img' in HTML. No use case in JSON."""

    @abstractmethod
    def add_property(self, name: str, value: str):
        """Add a single name/value pair at the current position."""

    @abstractmethod
    def add_properties(self, properties: Property):
        """Add every pair of `properties` in order."""

    @abstractmethod
    def add_comment(self, comment: str):
        """Add a comment at the current position."""

    @abstractmethod
    def quote_value(self, value: Any) -> str:
        """Return `value` escaped for use as a property value of this format."""

    # ------------------------------------------------------------------
    # Shared operations
    # ------------------------------------------------------------------

    def open_tag_w_property(self, tag: str, prop: str, value: str):
        """Combines open_tag() and add_property()."""
        self.open_tag(tag)
        self.add_property(prop, value)

    def single_tag_w_property(self, tag: str, prop: str, value: str):
        """Combines single_tag() and add_property()."""
        self.single_tag(tag)
        self.add_property(prop, value)

    def line_feed(self, n: int = 1):
        """Add n line feeds and the current indent."""
        self.content += self.core.line_feed(n)

    def line_feed_inc(self):
        """Increase the indent by one step, then line feed."""
        self.content += self.core.line_feed_inc()

    def line_feed_dec(self):
        """Decrease the indent by one step, then line feed."""
        self.content += self.core.line_feed_dec()

    def inc_indent_step(self):
        self.core.inc_indent_step()

    def dec_indent_step(self):
        self.core.dec_indent_step()

    def set_indent_step(self, indent_step: int):
        self.core.set_indent_step(indent_step)

    def set_indent_step_size(self, indent_step_size: int):
        self.core.set_indent_step_size(indent_step_size)

    def clear(self):
        """Empty the content and reset the writer to its defaults."""
        self.content = ""
        self.core.clear(self.DEFAULT_INDENT_STEP_SIZE)

    def write(self, text: str) -> int:
        """Append raw text. Makes the writer usable as a file for print()."""
        self.content += text
        return len(text)

    def describe(self) -> str:
        """Dump the writer state followed by the content."""
        return (
            f"indent_step_size: {self.core.indent_step_size}\n"
            f"indent: {len(self.core.indent)}\n"
            f"block_stack: {self.core.block_stack}\n"
            f"{self.content}\n"
        )

    def copy(self) -> "MLLWriter":
        """Independent clone of the writer."""
        return copy.deepcopy(self)

    @property
    def open_blocks(self) -> int:
        """Number of opened, not yet closed blocks."""
        return len(self.core.block_stack)

    def __str__(self):
        return self.content

    def __repr__(self):
        return f"{type(self).__name__}(content={len(self.content)} chars, core={self.core!r})"


def as_text(value: Any) -> str:
    """Plain text form of a property value for the markup writers."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
