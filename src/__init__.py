"""
Book Search Package.

Literal text search over scanned book records, with hyphen-broken words
rejoined across consecutive lines. Books are loaded from JSON corpus files
or built from scanned PDFs.
"""

__version__ = "1.0.0"
