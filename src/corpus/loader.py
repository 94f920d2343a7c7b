"""
Corpus loading for the Book Search Engine.

Reads book records from JSON corpus files and assembles a library from a
data directory, building books from scanned PDFs where needed.

A corpus file holds a list of book records:

    [{"Title": ..., "ISBN": ..., "Content": [{"Page": ..., "Line": ..., "Text": ...}]}]

An object with a "Books" list is accepted as well.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List, Union

from ..core import get_logger, CorpusError, ExtractionError
from ..extraction import BookExtractor, FileScanner
from ..search.models import Book

logger = get_logger(__name__)


def books_from_records(records: Any) -> List[Book]:
    """
    Convert decoded JSON records into Books.

    Args:
        records: List of book mappings.

    Returns:
        Books in record order. Entries that are not mappings are skipped.

    Raises:
        CorpusError: If records is not a list.
    """
    if not isinstance(records, list):
        raise CorpusError(
            "Book records must be a list",
            details={"type": type(records).__name__}
        )

    books = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.warning(f"Skipping book record {index}: not an object")
            continue
        books.append(Book.from_dict(record))

    return books


def load_books(path: Union[str, Path]) -> List[Book]:
    """
    Load books from a JSON corpus file.

    Args:
        path: Path to the JSON file.

    Returns:
        Books in file order.

    Raises:
        CorpusError: If the file is missing, unreadable, or malformed.
    """
    path = Path(path)

    if not path.exists():
        raise CorpusError(f"Corpus file not found: {path}", path=str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusError(f"Invalid JSON in corpus file: {e}", path=str(path))
    except OSError as e:
        raise CorpusError(f"Cannot read corpus file: {e}", path=str(path))

    if isinstance(data, Mapping) and "Books" in data:
        data = data["Books"]

    try:
        books = books_from_records(data)
    except CorpusError as e:
        raise CorpusError(e.message, path=str(path), details=e.details)

    logger.debug(f"Loaded {len(books)} books from {path.name}")
    return books


def load_library(
    root_directory: Union[str, Path] = None,
    extractor: BookExtractor = None
) -> List[Book]:
    """
    Load every book found under a data directory.

    JSON files are read as corpus files, PDFs are extracted into one book
    each. Files that fail to load are logged and skipped.

    Args:
        root_directory: Directory to scan. Defaults to config value.
        extractor: BookExtractor for PDFs. Created on first PDF if omitted.

    Returns:
        Books from all files, in file path order.
    """
    scanner = FileScanner(root_directory)
    books = []
    failed = 0

    for corpus_file in scanner.scan():
        try:
            if corpus_file.kind == "json":
                books.extend(load_books(corpus_file.path))
            else:
                if extractor is None:
                    extractor = BookExtractor()
                books.append(extractor.extract_book(corpus_file.path))
        except (CorpusError, ExtractionError) as e:
            failed += 1
            logger.warning(f"Skipping {corpus_file.path.name}: {e.message}")

    logger.info(f"Library loaded: {len(books)} books, {failed} files failed")
    return books


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python loader.py <corpus.json>")
        sys.exit(1)

    try:
        for book in load_books(sys.argv[1]):
            count = len(book.content) if book.content is not None else 0
            print(f"  {book.isbn}: {book.title} ({count} lines)")
    except CorpusError as e:
        print(f"Corpus error: {e.message}")
