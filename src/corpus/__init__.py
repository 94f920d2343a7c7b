"""
Corpus module for loading books to search.

Reads JSON book records and builds a library from a data directory
of JSON corpus files and scanned PDFs.
"""

from .loader import books_from_records, load_books, load_library

__all__ = [
    "books_from_records",
    "load_books",
    "load_library"
]
