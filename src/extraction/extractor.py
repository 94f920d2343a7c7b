"""
PDF-to-book extraction with backend fallback.

Runs the configured line backends in order until one finds text, and wraps
the lines it returns into a Book.
"""

from pathlib import Path
from typing import List, Union

from ..core import get_config, get_logger, ExtractionError
from ..search.models import Book, Line
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend

logger = get_logger(__name__)


BACKENDS = {
    "pypdf": PyPDFBackend,
    "pdfplumber": PDFPlumberBackend
}


class BookExtractor:
    """
    Builds Book records from scanned PDFs.

    Backends are tried in order: the primary first, then the fallback
    when the primary fails or finds no text lines.
    """

    def __init__(
        self,
        primary_backend: str = None,
        fallback_backend: str = None
    ):
        """
        Initialize the extractor with configured backends.

        Args:
            primary_backend: Name of primary backend ("pypdf" or "pdfplumber").
            fallback_backend: Name of fallback backend; ignored if unknown
                or equal to the primary.

        Raises:
            ExtractionError: If the primary backend name is unknown.
        """
        config = get_config()

        primary_name = primary_backend or config.extraction.primary_backend
        fallback_name = fallback_backend or config.extraction.fallback_backend

        if primary_name not in BACKENDS:
            raise ExtractionError(
                f"Unknown backend: {primary_name}",
                details={"available": sorted(BACKENDS)}
            )

        self.backends = [BACKENDS[primary_name]()]
        if fallback_name in BACKENDS and fallback_name != primary_name:
            self.backends.append(BACKENDS[fallback_name]())

        logger.debug(f"Extractor backends: {[b.name for b in self.backends]}")

    def extract_lines(self, filepath: Union[str, Path]) -> List[Line]:
        """
        Extract the text lines of a PDF with the first backend that finds any.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Lines in page order.

        Raises:
            ExtractionError: The first backend error if every backend
                failed, otherwise a "no text lines" error.
        """
        filepath = Path(filepath)
        errors = []

        for backend in self.backends:
            try:
                lines = backend.extract_lines(filepath)
            except ExtractionError as e:
                errors.append(e)
                logger.debug(f"{backend.name} failed on {filepath.name}: {e.message}")
                continue

            if lines:
                return lines

            logger.debug(f"{backend.name} found no text lines in {filepath.name}")

        if errors:
            raise errors[0]

        raise ExtractionError("No text lines found", filepath=str(filepath))

    def extract_book(
        self,
        filepath: Union[str, Path],
        title: str = None,
        isbn: str = None
    ) -> Book:
        """
        Build a Book from a scanned PDF.

        Args:
            filepath: Path to the PDF file.
            title: Book title. Defaults to the file stem.
            isbn: Book ISBN, if known.

        Returns:
            Book whose content lists every non-blank line in page order.

        Raises:
            ExtractionError: If no backend can extract the file.
        """
        filepath = Path(filepath)
        lines = self.extract_lines(filepath)

        logger.info(f"Extracted {len(lines)} lines from {filepath.name}")

        return Book(
            title=title or filepath.stem,
            isbn=isbn,
            content=tuple(lines)
        )


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python extractor.py <pdf_file>")
        sys.exit(1)

    try:
        book = BookExtractor().extract_book(sys.argv[1])
    except ExtractionError as e:
        print(f"Extraction failed: {e.message}")
        sys.exit(1)

    for line in book.content[:10]:
        print(f"  p.{line.page} l.{line.line}: {line.text}")
