"""
XML variant of the MLLWriter.
"""

from typing import Any
from xml.sax.saxutils import escape

from .markup import MarkupWriter
from .writer import as_text

_ATTRIBUTE_ENTITIES = {'"': "&quot;"}


class XMLWriter(MarkupWriter):
    """
    Writer for XML files. Default indent step size is 2. Like the HTMLWriter
    it never adds line feeds on its own.
    """

    DEFAULT_INDENT_STEP_SIZE = 2

    def declaration(self, version: str = "1.0", encoding: str = "UTF-8"):
        """Write the XML declaration, e.g. <?xml version="1.0" encoding="UTF-8"?>."""
        self.content += f'<?xml version="{version}" encoding="{encoding}"?>'

    def escape_text(self, text: str) -> str:
        return escape(text)

    def quote_value(self, value: Any) -> str:
        return escape(as_text(value), _ATTRIBUTE_ENTITIES)
