"""
File utility functions for the Book Search Engine.

Provides size calculations used when filtering corpus files.
"""

from pathlib import Path
from typing import Union


def get_file_size_mb(filepath: Union[str, Path]) -> float:
    """
    Get file size in megabytes.

    Args:
        filepath: Path to the file.

    Returns:
        File size in MB, rounded to 2 decimal places.
    """
    filepath = Path(filepath)
    size_bytes = filepath.stat().st_size
    return round(size_bytes / (1024 * 1024), 2)


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python file_utils.py <file>")
        sys.exit(1)

    print(f"Size: {get_file_size_mb(sys.argv[1])} MB")
