"""
Literal search over scanned book lines.

A line matches when the search term occurs in its text, or in the word
reconstructed from a line-final hyphen break: the last word of the line
(without its hyphen) joined to the first word of the next line. Matches
are always reported on the line where the broken word starts.
"""

from typing import Any, List, Optional, Sequence

from ..core import get_logger
from .models import Book, SearchResponse, SearchResult

logger = get_logger(__name__)


BREAK_MARKER = "-"


def is_present(value: Any) -> bool:
    """Return True unless the value is missing (None)."""
    return value is not None


def join_broken_word(text: str, next_text: Optional[str]) -> str:
    """
    Rejoin a word broken across two lines by a trailing hyphen.

    The first half runs from the last space of ``text`` (space included)
    up to the trailing hyphen; the second half is ``next_text`` up to its
    first space. Without a space in ``text`` the first half starts at the
    beginning of the line; without a space in ``next_text`` the whole next
    line is used. A missing next line contributes nothing.

    Args:
        text: Line text ending with the break marker.
        next_text: Text of the following line, possibly None.

    Returns:
        The rejoined word, e.g. " darkness" for "The dark-" / "ness was".
    """
    start = max(text.rfind(" "), 0)
    first_half = text[start:len(text) - len(BREAK_MARKER)]

    if not is_present(next_text):
        return first_half

    end = next_text.find(" ")
    if end == -1:
        end = len(next_text)

    return first_half + next_text[:end]


def search(term: str, books: Sequence[Book]) -> SearchResponse:
    """
    Find every line containing the term, in book-then-line order.

    The term is matched literally: case-sensitive, untrimmed, no pattern
    syntax. Books without content and lines without text contribute no
    results; nothing here raises for missing fields.

    Args:
        term: Literal substring to look for.
        books: Books to scan, in order.

    Returns:
        SearchResponse with the term and the matching lines.
    """
    results: List[SearchResult] = []

    for book in books:
        if not is_present(book.content):
            continue

        lines = book.content
        last_index = len(lines) - 1

        for index, line in enumerate(lines):
            if not is_present(line.text):
                continue

            joined = ""
            if line.text.endswith(BREAK_MARKER) and index < last_index:
                joined = join_broken_word(line.text, lines[index + 1].text)

            if term in joined or term in line.text:
                results.append(
                    SearchResult(isbn=book.isbn, page=line.page, line=line.line)
                )

    logger.debug(f"Search {term!r}: {len(results)} results in {len(books)} books")

    return SearchResponse(search_term=term, results=tuple(results))


if __name__ == "__main__":
    from .models import Line

    book = Book(
        title="Twenty Thousand Leagues Under the Sea",
        isbn="9780000528531",
        content=(
            Line(31, 8, "now simply went on by her own momentum.  The dark-"),
            Line(31, 9, "ness was then profound; and however good the Canadian's"),
            Line(31, 10, "eyes were, I asked myself how he had managed to see, and"),
        )
    )

    for query in ["darkness", "the", "The", "dark-", " "]:
        response = search(query, [book])
        print(f"{query!r}: {[(r.page, r.line) for r in response.results]}")
