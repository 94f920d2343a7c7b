"""
Search module for literal matching over scanned book lines.

Provides the book/line/result models and the search routine that
rejoins hyphen-broken words across consecutive lines.
"""

from .models import Book, Line, SearchResult, SearchResponse
from .engine import search, join_broken_word, is_present

__all__ = [
    "Book",
    "Line",
    "SearchResult",
    "SearchResponse",
    "search",
    "join_broken_word",
    "is_present"
]
