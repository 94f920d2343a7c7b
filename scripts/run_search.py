"""
CLI script to search a term across a book corpus.

Usage:
    python scripts/run_search.py darkness                        # Search the data directory
    python scripts/run_search.py darkness --corpus books.json    # Search specific files
    python scripts/run_search.py " " --data-dir path/to/books
    python scripts/run_search.py the --config path/to/config.json
"""

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core import get_config, get_logger, ConfigurationError, CorpusError, ExtractionError
from src.core.config_loader import reload_config
from src.core.logger import configure_logging
from src.corpus import load_books, load_library
from src.extraction import BookExtractor
from src.search import search


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search scanned books for a literal term"
    )

    parser.add_argument(
        "term",
        help="Literal search term (case-sensitive, not trimmed)"
    )

    parser.add_argument(
        "--corpus",
        nargs="+",
        type=str,
        help="JSON corpus files or PDFs to search instead of the data directory"
    )

    parser.add_argument(
        "--data-dir",
        type=str,
        help="Directory of corpus files (defaults to config data_directory)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to custom config.json file"
    )

    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation for the printed response"
    )

    return parser.parse_args()


def load_corpus(paths):
    """Load books from explicitly listed JSON and PDF files."""
    books = []
    extractor = None

    for path in map(Path, paths):
        if path.suffix.lower() == ".pdf":
            if extractor is None:
                extractor = BookExtractor()
            books.append(extractor.extract_book(path))
        else:
            books.extend(load_books(path))

    return books


def main():
    """Main entry point for the search CLI."""
    args = parse_args()

    try:
        if args.config:
            config = reload_config(Path(args.config))
        else:
            config = get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config, force=True)
    logger = get_logger(__name__)

    try:
        if args.corpus:
            books = load_corpus(args.corpus)
        else:
            books = load_library(args.data_dir or config.paths.data_directory)
    except (CorpusError, ExtractionError) as e:
        print(f"Corpus error: {e.message}", file=sys.stderr)
        sys.exit(1)

    response = search(args.term, books)
    logger.info(f"Found {len(response.results)} matching lines in {len(books)} books")

    print(json.dumps(response.to_dict(), indent=args.indent, ensure_ascii=False))
    sys.exit(0)


if __name__ == "__main__":
    main()
