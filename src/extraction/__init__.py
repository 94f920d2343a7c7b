"""
Scanned-book extraction module for the Book Search Engine.

Provides corpus file discovery and PDF line extraction with two backends
(pypdf and pdfplumber) and fallback between them, producing Book records.
"""

from .file_scanner import FileScanner, CorpusFile
from .base import LineBackend, page_lines
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend
from .extractor import BookExtractor

__all__ = [
    "FileScanner",
    "CorpusFile",
    "LineBackend",
    "page_lines",
    "PyPDFBackend",
    "PDFPlumberBackend",
    "BookExtractor"
]
