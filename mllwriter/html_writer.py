"""
HTML variant of the MLLWriter.
"""

import html
from typing import Any

from .markup import MarkupWriter
from .writer import as_text


class HTMLWriter(MarkupWriter):
    """
    Writer for HTML files. Default indent step size is 4.

    Example:
        wr = HTMLWriter()
        wr.open_tag_w_property("div", "class", "container")
        wr.add_property("id", "logo")
        wr.line_feed_inc()
        wr.single_tag("img")
        wr.add_property("style", "width: auto")
        wr.line_feed_dec()
        wr.close_tag()
    """

    DEFAULT_INDENT_STEP_SIZE = 4

    def doctype(self):
        """Write the HTML5 document type declaration."""
        self.content += "<!DOCTYPE html>"

    def escape_text(self, text: str) -> str:
        return html.escape(text, quote=False)

    def quote_value(self, value: Any) -> str:
        return html.escape(as_text(value), quote=True)

