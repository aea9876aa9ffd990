"""
Exception types raised by the writers and the document renderer.
"""


class MLLWriterError(Exception):
    """Base exception for all writer errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotationError(MLLWriterError, ValueError):
    """Tag or attribute name is not in lowercase ASCII-alphanumeric notation."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"'{name}' is not a valid name: only lowercase ASCII letters and digits are accepted"
        )


class UnbalancedTagError(MLLWriterError):
    """close_tag() was called without an open block."""


class WriterStateError(MLLWriterError):
    """The content under edit does not allow the requested operation."""


class UnsupportedOperationError(MLLWriterError, NotImplementedError):
    """The operation has no meaning for this writer type."""


class DocumentError(MLLWriterError):
    """A document tree or configuration file could not be used."""
