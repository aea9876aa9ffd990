"""
JSON variant of the MLLWriter.

Each method writes only its own task: open_tag() writes the '{', add_property()
writes only the member. Whenever a line feed, indent or separating comma is
needed, it is derived from the current ending of the content right before the
actual task is written.
"""

import json
from typing import Any, Optional

from .exceptions import UnsupportedOperationError
from .writer import MLLWriter, Property


class JSONWriter(MLLWriter):
    """
    Writer for JSON files. Default indent step size is 2.

    Line feeds are added automatically when adding members or closing blocks.
    Several members can be passed via add_properties(), but no nested objects:
    a nested object is opened with open_tag() and the member name as tag.
    Member values are written verbatim, so strings have to be passed quoted
    (or run through quote_value()).
    """

    DEFAULT_INDENT_STEP_SIZE = 2

    def __init__(self, indent_step_size: Optional[int] = None):
        super().__init__(indent_step_size)
        self.comment_count = 0

    def _prepare_write(self):
        """Line feed with indent increment after '{', comma separation otherwise."""
        if self.content.endswith("{"):
            self.line_feed_inc()
        elif self.content:
            self.content += ",\n" + self.core.indent

    def open_tag(self, tag: str):
        self._prepare_write()
        if tag:
            self.content += f"{_quote_name(tag)}:\n{self.core.indent}{{"
        else:
            self.content += "{"
        self.core.push(tag)

    def close_tag(self):
        self.core.pop()
        if self.content.endswith("{"):
            # empty block, the indent was never increased
            self.line_feed()
        else:
            self.line_feed_dec()
        self.content += "}"

    def single_tag(self, tag: str):
        raise UnsupportedOperationError("there is no single_element in the JSONWriter")

    def add_property(self, name: str, value: str):
        self._prepare_write()
        self.content += f"{_quote_name(name)}: {value}"

    def add_properties(self, properties: Property):
        for name, value in properties:
            self.add_property(name, value)

    def add_comment(self, comment: str):
        """JSON has no comments, so they are written as "_commentN" members."""
        self.comment_count += 1
        self.add_property(f"_comment{self.comment_count}", self.quote_value(comment))

    def quote_value(self, value: Any) -> str:
        return json.dumps(value, ensure_ascii=False)

    def clear(self):
        super().clear()
        self.comment_count = 0


def _quote_name(name: str) -> str:
    return json.dumps(name, ensure_ascii=False)
