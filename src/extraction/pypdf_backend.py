"""
pypdf-based line extraction.

Reads the text layer page by page and splits it on line breaks. Encrypted
scans are opened with an empty password when the owner allows it.
"""

from pathlib import Path
from typing import Iterator, List, Tuple

from pypdf import PasswordType, PdfReader

from ..core import get_logger, ExtractionError
from .base import LineBackend

logger = get_logger(__name__)


class PyPDFBackend(LineBackend):
    """Fast line extraction for scans with a plain text layer."""

    name = "pypdf"

    def _read_pages(self, filepath: Path) -> Iterator[Tuple[int, List[str]]]:
        reader = PdfReader(filepath)

        if reader.is_encrypted:
            self._unlock(reader, filepath)

        logger.debug(f"Reading {len(reader.pages)} pages with pypdf: {filepath.name}")

        for page_num, page in enumerate(reader.pages, start=1):
            try:
                text = page.extract_text() or ""
            except Exception as e:
                logger.warning(f"Skipping page {page_num} of {filepath.name}: {e}")
                continue

            yield page_num, text.splitlines()

    @staticmethod
    def _unlock(reader: PdfReader, filepath: Path) -> None:
        """Decrypt with the empty user password or raise ExtractionError."""
        try:
            result = reader.decrypt("")
        except Exception as e:
            raise ExtractionError(
                f"PDF is encrypted and cannot be decrypted: {e}",
                filepath=str(filepath)
            )

        if result == PasswordType.NOT_DECRYPTED:
            raise ExtractionError(
                "PDF is encrypted and needs a password",
                filepath=str(filepath)
            )
