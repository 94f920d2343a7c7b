"""
Discovery of corpus files under a data directory.

JSON corpus files and scanned PDFs are found recursively and reported
with their kind, in path order, so a library always loads identically.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from ..core import get_config, get_logger
from ..utils import get_file_size_mb

logger = get_logger(__name__)


CORPUS_KINDS = {
    ".json": "json",
    ".pdf": "pdf"
}


@dataclass(frozen=True)
class CorpusFile:
    """
    A discovered corpus file.

    Attributes:
        path: Location of the file.
        kind: "json" for book records, "pdf" for a scanned book.
    """
    path: Path
    kind: str


class FileScanner:
    """Finds corpus files of the enabled kinds below a root directory."""

    def __init__(
        self,
        root_directory: Union[str, Path] = None,
        extensions: List[str] = None,
        max_file_size_mb: float = None
    ):
        """
        Args:
            root_directory: Directory to scan. Defaults to config value.
            extensions: Enabled extensions, a subset of CORPUS_KINDS.
            max_file_size_mb: Skip files larger than this size.
        """
        config = get_config()

        self.root_directory = Path(root_directory or config.paths.data_directory)
        self.max_file_size_mb = max_file_size_mb or config.extraction.max_file_size_mb
        self.extensions = {
            ext.lower() for ext in (extensions or config.extraction.supported_extensions)
        }

    def kind_of(self, path: Path) -> Optional[str]:
        """Return the corpus kind of a path, or None if it is not enabled."""
        suffix = path.suffix.lower()
        if suffix not in self.extensions:
            return None
        return CORPUS_KINDS.get(suffix)

    def scan(self) -> List[CorpusFile]:
        """
        Find every enabled corpus file, sorted by path.

        Returns:
            CorpusFile entries; empty if the root directory is missing.
        """
        if not self.root_directory.is_dir():
            logger.warning(f"Corpus directory does not exist: {self.root_directory}")
            return []

        found = []
        for path in sorted(self.root_directory.rglob("*")):
            kind = self.kind_of(path)
            if kind is None or not path.is_file():
                continue

            try:
                size_mb = get_file_size_mb(path)
            except OSError as e:
                logger.warning(f"Cannot access corpus file {path}: {e}")
                continue

            if size_mb > self.max_file_size_mb:
                logger.info(f"Skipping {path.name}: {size_mb}MB exceeds {self.max_file_size_mb}MB")
                continue

            found.append(CorpusFile(path=path, kind=kind))

        logger.info(f"Found {len(found)} corpus files under {self.root_directory}")
        return found
