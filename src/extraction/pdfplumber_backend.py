"""
pdfplumber-based line extraction.

Uses pdfplumber's layout analysis to group characters into text lines,
which copes better with justified and multi-column book pages.
"""

from pathlib import Path
from typing import Iterator, List, Tuple

import pdfplumber

from ..core import get_logger
from .base import LineBackend

logger = get_logger(__name__)


class PDFPlumberBackend(LineBackend):
    """Slower, layout-aware line extraction."""

    name = "pdfplumber"

    def _read_pages(self, filepath: Path) -> Iterator[Tuple[int, List[str]]]:
        with pdfplumber.open(filepath) as pdf:
            logger.debug(f"Reading {len(pdf.pages)} pages with pdfplumber: {filepath.name}")

            for page_num, page in enumerate(pdf.pages, start=1):
                try:
                    rows = page.extract_text_lines(return_chars=False)
                except Exception as e:
                    logger.warning(f"Skipping page {page_num} of {filepath.name}: {e}")
                    continue

                yield page_num, [row["text"] for row in rows]
