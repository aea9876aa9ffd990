"""
Tag based writing shared by the HTML and XML writers.
"""

from abc import abstractmethod
from typing import Optional

from .exceptions import WriterStateError
from .writer import MLLWriter, Property, check_notation


class MarkupWriter(MLLWriter):
    """
    Writes '<tag>' style markup. There is no auto-fill of any kind: line feeds
    and indentation are left to the caller via line_feed(), line_feed_inc()
    and line_feed_dec(), so documents can be styled in any taste.
    """

    def __init__(self, indent_step_size: Optional[int] = None):
        super().__init__(indent_step_size)
        # Length of the content right after the last opening or single tag
        self._tag_end: Optional[int] = None

    def open_tag(self, tag: str):
        check_notation(tag)
        self.content += f"<{tag}>"
        self.core.push(tag)
        self._tag_end = len(self.content)

    def close_tag(self):
        tag = self.core.pop()
        self.content += f"</{tag}>"

    def single_tag(self, tag: str):
        check_notation(tag)
        self.content += f"<{tag}>"
        self._tag_end = len(self.content)

    def add_property(self, name: str, value: str):
        check_notation(name)
        # Re-open the last written tag, insert the pair and close it again
        self.content = self._reopen_tag() + f' {name}="{value}">'
        self._tag_end = len(self.content)

    def add_properties(self, properties: Property):
        for name, _ in properties:
            check_notation(name)
        attributes = "".join(f' {name}="{value}"' for name, value in properties)
        self.content = self._reopen_tag() + attributes + ">"
        self._tag_end = len(self.content)

    def add_comment(self, comment: str):
        self.content += f"<!-- {comment} -->"

    def add_text(self, text: str):
        """Add escaped character data at the current position."""
        self.content += self.escape_text(text)

    def clear(self):
        super().clear()
        self._tag_end = None

    @abstractmethod
    def escape_text(self, text: str) -> str:
        """Escape character data for this format."""

    def _reopen_tag(self) -> str:
        """
        Return the content without the closing '>' of the last opening or single tag.

        Anything written after that tag (a comment, text, a closing tag, a line
        feed or raw text) moves the content past the recorded end and makes the
        tag final.
        """
        if self._tag_end is None or self._tag_end != len(self.content) or not self.content.endswith(">"):
            raise WriterStateError("properties can only be added directly after an opening or single tag")
        return self.content[:-1]
