"""
Output generation module.
Renders document trees with the writers and stores the result.
"""

from .file_writer import DocumentFileWriter
from .renderer import DocumentRenderer, writer_for

__all__ = [
    'DocumentFileWriter',
    'DocumentRenderer',
    'writer_for',
]
