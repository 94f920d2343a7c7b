"""
Shared behaviour of the scanned-line extraction backends.

A backend reads a PDF page by page and reports the raw text lines of each
page; this module turns them into Line records numbered from 1 within each
page. Line text keeps everything but surrounding whitespace, so a word
broken at the end of a printed line still ends with its hyphen.
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple, Union

from ..core import get_logger, ExtractionError
from ..search.models import Line
from ..utils import clean_line

logger = get_logger(__name__)


def page_lines(page_num: int, raw_lines: Iterable[str]) -> List[Line]:
    """
    Number the non-blank lines of one page.

    Args:
        page_num: 1-indexed page number.
        raw_lines: Line texts in reading order.

    Returns:
        Line records, blank lines dropped.
    """
    texts = (clean_line(raw) for raw in raw_lines)
    return [
        Line(page=page_num, line=line_num, text=text)
        for line_num, text in enumerate((t for t in texts if t), start=1)
    ]


class LineBackend:
    """
    Base class for backends producing scanned lines from a PDF.

    Subclasses implement _read_pages(); failures other than
    ExtractionError are wrapped with the backend name and file path.
    """

    name = "base"

    def extract_lines(self, filepath: Union[str, Path]) -> List[Line]:
        """
        Extract every text line of a PDF.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Lines in page order; empty if the PDF has no text layer.

        Raises:
            ExtractionError: If the file cannot be read.
        """
        filepath = Path(filepath)
        lines: List[Line] = []

        try:
            for page_num, raw_lines in self._read_pages(filepath):
                numbered = page_lines(page_num, raw_lines)
                if not numbered:
                    logger.debug(f"No text on page {page_num} of {filepath.name}")
                lines.extend(numbered)
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"{self.name} extraction failed: {e}",
                filepath=str(filepath),
                details={"backend": self.name}
            )

        return lines

    def _read_pages(self, filepath: Path) -> Iterator[Tuple[int, List[str]]]:
        """Yield (page_number, raw_lines) for each readable page."""
        raise NotImplementedError
