"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, mock configurations, sample book corpora
and a minimal PDF to keep tests isolated and deterministic.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator, List

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from src.search.models import Book  # noqa: E402


TWENTY_LEAGUES_RECORD = {
    "Title": "Twenty Thousand Leagues Under the Sea",
    "ISBN": "9780000528531",
    "Content": [
        {
            "Page": 31,
            "Line": 8,
            "Text": "now simply went on by her own momentum.  The dark-"
        },
        {
            "Page": 31,
            "Line": 9,
            "Text": "ness was then profound; and however good the Canadian's"
        },
        {
            "Page": 31,
            "Line": 10,
            "Text": "eyes were, I asked myself how he had managed to see, and"
        }
    ]
}

SAMPLE_RECORDS = [
    {
        "Title": "Happy Book of Dashes",
        "ISBN": "000000000",
        "Content": [
            {"Page": 12, "Line": 1, "Text": "-- dash - dash -- dash dash - dash dash-"},
            {"Page": 12, "Line": 2, "Text": "dash - dash --- dashing and dashing -"}
        ]
    },
    TWENTY_LEAGUES_RECORD,
    {
        "Title": "Harry Potter and the Order of the Phoenix",
        "ISBN": "000000001",
        "Content": []
    },
    {
        "Title": None,
        "ISBN": None,
        "Content": None
    },
    {
        "Title": "The Happy Book of weird stuff",
        "ISBN": "0000000002",
        "Content": [{"Page": None, "Line": None, "Text": None}]
    },
    {
        "Title": "The Happy Book of weird stuff 2",
        "ISBN": "0000000003",
        "Content": [{"Page": None, "Line": None, "Text": "Happy Happy Days"}]
    }
]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="book_search_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    data_dir = temp_dir / "data"
    data_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"
    logs_dir.mkdir(parents=True)

    config_data = {
        "paths": {
            "data_directory": str(data_dir),
            "logs_directory": str(logs_dir)
        },
        "extraction": {
            "primary_backend": "pypdf",
            "fallback_backend": "pdfplumber",
            "max_file_size_mb": 100,
            "supported_extensions": [".json", ".pdf"]
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def configured(temp_config, reset_config_singleton):
    """
    Load the temporary config into the singleton.

    Returns:
        The loaded Config instance.
    """
    from src.core.config_loader import get_config
    return get_config(temp_config)


@pytest.fixture
def twenty_leagues() -> List[Book]:
    """The single-book Twenty Thousand Leagues corpus."""
    return [Book.from_dict(TWENTY_LEAGUES_RECORD)]


@pytest.fixture
def sample_books() -> List[Book]:
    """
    The mixed sample corpus.

    Includes a book of dashes, an empty book, a book without content,
    a line without text and lines without page/line numbers.
    """
    return [Book.from_dict(record) for record in SAMPLE_RECORDS]


@pytest.fixture
def corpus_file(temp_dir: Path) -> Path:
    """
    Write the sample corpus to a JSON file.

    Returns:
        Path to the corpus file.
    """
    path = temp_dir / "sample_books.json"
    path.write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
    return path


@pytest.fixture
def sample_pdf_content() -> bytes:
    """
    Create minimal valid PDF content for testing.

    Returns:
        Bytes representing a minimal PDF with text.
    """
    pdf_content = b"""%PDF-1.4
1 0 obj
<< /Type /Catalog /Pages 2 0 R >>
endobj
2 0 obj
<< /Type /Pages /Kids [3 0 R] /Count 1 >>
endobj
3 0 obj
<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792]
   /Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>
endobj
4 0 obj
<< /Length 44 >>
stream
BT /F1 12 Tf 100 700 Td (Hello World) Tj ET
endstream
endobj
5 0 obj
<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>
endobj
xref
0 6
0000000000 65535 f
0000000009 00000 n
0000000058 00000 n
0000000115 00000 n
0000000266 00000 n
0000000359 00000 n
trailer
<< /Size 6 /Root 1 0 R >>
startxref
434
%%EOF"""
    return pdf_content


@pytest.fixture
def sample_pdf(temp_dir: Path, sample_pdf_content: bytes) -> Path:
    """
    Create a sample PDF file for testing.

    Returns:
        Path to the created PDF file.
    """
    pdf_path = temp_dir / "sample.pdf"
    pdf_path.write_bytes(sample_pdf_content)
    return pdf_path


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from src.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.
    """
    from src.core import logger
    logger._logger_initialized = False
    yield
    logger._logger_initialized = False
