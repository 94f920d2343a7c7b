"""
Tests for the pdfplumber line extraction backend.

Tests layout-based line extraction and error cases using a minimal
PDF fixture and a mocked pdfplumber module.
"""

import pytest
from unittest.mock import patch, Mock, MagicMock

from src.core.exceptions import ExtractionError
from src.extraction.pdfplumber_backend import PDFPlumberBackend
from src.search.models import Line


@pytest.fixture
def backend():
    """Create a PDFPlumberBackend instance."""
    return PDFPlumberBackend()


def _mock_pdf(pages_rows):
    """Build a mock pdfplumber document; each page returns the given line texts."""
    pages = []
    for rows in pages_rows:
        page = Mock()
        if isinstance(rows, Exception):
            page.extract_text_lines.side_effect = rows
        else:
            page.extract_text_lines.return_value = [{"text": text} for text in rows]
        pages.append(page)

    mock_pdf = MagicMock()
    mock_pdf.pages = pages
    mock_pdf.__enter__ = Mock(return_value=mock_pdf)
    mock_pdf.__exit__ = Mock(return_value=False)
    return mock_pdf


class TestPDFPlumberBackend:
    """Tests against real files."""

    def test_backend_name(self, backend):
        assert backend.name == "pdfplumber"

    def test_nonexistent_file_raises(self, backend, temp_dir):
        with pytest.raises(ExtractionError):
            backend.extract_lines(temp_dir / "nonexistent.pdf")

    def test_invalid_pdf_raises(self, backend, temp_dir):
        invalid_pdf = temp_dir / "invalid.pdf"
        invalid_pdf.write_bytes(b"Not a valid PDF")

        with pytest.raises(ExtractionError):
            backend.extract_lines(invalid_pdf)


class TestPDFPlumberBackendWithMock:
    """Tests using mocked pdfplumber for deterministic behavior."""

    @patch("src.extraction.pdfplumber_backend.pdfplumber")
    def test_text_lines_become_lines(self, mock_pdfplumber, backend, sample_pdf):
        mock_pdfplumber.open.return_value = _mock_pdf([
            ["-- dash - dash -- dash dash - dash dash-", "dash - dash --- dashing and dashing -"]
        ])

        lines = backend.extract_lines(sample_pdf)

        assert lines == [
            Line(1, 1, "-- dash - dash -- dash dash - dash dash-"),
            Line(1, 2, "dash - dash --- dashing and dashing -")
        ]

    @patch("src.extraction.pdfplumber_backend.pdfplumber")
    def test_requests_lines_without_chars(self, mock_pdfplumber, backend, sample_pdf):
        mock_pdf = _mock_pdf([["text"]])
        mock_pdfplumber.open.return_value = mock_pdf

        backend.extract_lines(sample_pdf)

        mock_pdf.pages[0].extract_text_lines.assert_called_once_with(return_chars=False)

    @patch("src.extraction.pdfplumber_backend.pdfplumber")
    def test_continues_on_page_error(self, mock_pdfplumber, backend, sample_pdf):
        mock_pdfplumber.open.return_value = _mock_pdf([
            ["Good content"],
            Exception("Page corrupted"),
            ["More content"]
        ])

        lines = backend.extract_lines(sample_pdf)

        assert lines == [Line(1, 1, "Good content"), Line(3, 1, "More content")]

    @patch("src.extraction.pdfplumber_backend.pdfplumber")
    def test_open_failure_raises(self, mock_pdfplumber, backend, sample_pdf):
        mock_pdfplumber.open.side_effect = OSError("cannot open")

        with pytest.raises(ExtractionError, match="pdfplumber"):
            backend.extract_lines(sample_pdf)
