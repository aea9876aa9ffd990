"""
mllwriter - Markup-language-like writers.

A small collection of writers that simplify generating HTML, XML and JSON
text programmatically. MLLWriter is the shared abstraction, HTMLWriter,
XMLWriter and JSONWriter are its concrete writer types.
"""

from .exceptions import (
    DocumentError,
    MLLWriterError,
    NotationError,
    UnbalancedTagError,
    UnsupportedOperationError,
    WriterStateError,
)
from .html_writer import HTMLWriter
from .json_writer import JSONWriter
from .markup import MarkupWriter
from .writer import MLLWriter, Property, WriterCore, check_notation
from .xml_writer import XMLWriter

__version__ = "0.3.0"

__all__ = [
    'MLLWriter',
    'MarkupWriter',
    'WriterCore',
    'Property',
    'check_notation',
    'HTMLWriter',
    'XMLWriter',
    'JSONWriter',
    'MLLWriterError',
    'NotationError',
    'UnbalancedTagError',
    'WriterStateError',
    'UnsupportedOperationError',
    'DocumentError',
]
