"""
Text utility functions for the Book Search Engine.

Cleans extracted line text while keeping its characters intact apart from
surrounding whitespace, so a line-final hyphen stays the last character.
"""

import unicodedata


def clean_line(text: str) -> str:
    """
    Normalize a single extracted line.

    Applies NFC normalization, drops control characters, and strips
    surrounding whitespace. Inner spacing is left untouched.

    Args:
        text: Raw line text from PDF extraction.

    Returns:
        Cleaned line text.
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", text)

    text = "".join(
        char for char in text
        if not unicodedata.category(char).startswith("C") or char == "\t"
    )

    return text.strip()


if __name__ == "__main__":
    for raw in ["now simply went on by her own momentum.  The dark-  ", "ness was\x0c"]:
        print(repr(clean_line(raw)))
