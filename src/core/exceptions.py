"""
Custom exception hierarchy for the Book Search Engine.

Provides specific exception types for different failure modes:
configuration errors, PDF extraction failures, and corpus loading problems.
The search routine itself never raises; these cover the I/O layer around it.
"""


class BookSearchError(Exception):
    """Base exception for all Book Search Engine errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BookSearchError):
    """Raised when configuration is invalid or missing."""
    pass


class ExtractionError(BookSearchError):
    """Raised when PDF text extraction fails."""

    def __init__(self, message: str, filepath: str = None, details: dict = None):
        """
        Initialize extraction error.

        Args:
            message: Error description.
            filepath: Path to the problematic PDF file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.filepath = filepath


class CorpusError(BookSearchError):
    """Raised when a book corpus file cannot be read or has the wrong shape."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        """
        Initialize corpus error.

        Args:
            message: Error description.
            path: Path to the corpus file, if any.
            details: Additional context.
        """
        super().__init__(message, details)
        self.path = path


if __name__ == "__main__":
    try:
        raise ConfigurationError("Config file not found", {"path": "/config/config.json"})
    except BookSearchError as e:
        print(f"Caught: {e.__class__.__name__}: {e.message}")
        print(f"Details: {e.details}")

    try:
        raise CorpusError("Invalid JSON", path="/data/books.json")
    except CorpusError as e:
        print(f"Corpus failed: {e.path}")
