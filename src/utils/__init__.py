"""
Utility module providing shared helper functions.

Contains file operations and text processing utilities used across
the application. Depends only on the standard library.
"""

from .file_utils import get_file_size_mb
from .text_utils import clean_line

__all__ = [
    "get_file_size_mb",
    "clean_line"
]
