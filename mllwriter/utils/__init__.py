"""
Utility modules for mllwriter.
"""

from .logger import WriterLogger, get_logger, init_logger

__all__ = [
    'WriterLogger',
    'get_logger',
    'init_logger',
]
