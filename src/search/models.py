"""
Data models for book search.

Defines the book/line records searched over and the result types returned,
with conversion to and from the JSON record shape used by corpus files
(Title, ISBN, Content, Page, Line, Text).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Line:
    """
    One scanned line of a book.

    Attributes:
        page: Page number the line appears on.
        line: Line number within the page.
        text: Scanned text of the line.
    """
    page: Optional[int] = None
    line: Optional[int] = None
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Line":
        """
        Build a Line from a JSON record.

        Non-mapping records become an empty Line, and a Text value that is
        not a string is treated as missing.
        """
        if not isinstance(data, Mapping):
            return cls()

        text = data.get("Text")
        return cls(
            page=data.get("Page"),
            line=data.get("Line"),
            text=text if isinstance(text, str) else None
        )

    def to_dict(self) -> dict:
        return {"Page": self.page, "Line": self.line, "Text": self.text}


@dataclass(frozen=True)
class Book:
    """
    A scanned book.

    Attributes:
        title: Book title.
        isbn: ISBN, copied unchanged into search results.
        content: Lines in scan order, or None when the book has no content.
    """
    title: Optional[str] = None
    isbn: Optional[str] = None
    content: Optional[Tuple[Line, ...]] = None

    @classmethod
    def from_dict(cls, data: Mapping) -> "Book":
        """
        Build a Book from a JSON record.

        A Content value that is not a list is treated as missing.
        """
        content = data.get("Content")
        lines = None
        if isinstance(content, list):
            lines = tuple(Line.from_dict(item) for item in content)

        return cls(
            title=data.get("Title"),
            isbn=data.get("ISBN"),
            content=lines
        )

    def to_dict(self) -> dict:
        content = None
        if self.content is not None:
            content = [line.to_dict() for line in self.content]
        return {"Title": self.title, "ISBN": self.isbn, "Content": content}


@dataclass(frozen=True)
class SearchResult:
    """
    A single matching line.

    Attributes:
        isbn: ISBN of the book containing the line.
        page: Page of the matching line.
        line: Line number of the matching line.
    """
    isbn: Optional[str]
    page: Optional[int]
    line: Optional[int]

    def to_dict(self) -> dict:
        return {"ISBN": self.isbn, "Page": self.page, "Line": self.line}


@dataclass(frozen=True)
class SearchResponse:
    """
    Outcome of one search call.

    Attributes:
        search_term: The term exactly as it was searched.
        results: Matching lines in book-then-line scan order.
    """
    search_term: str
    results: Tuple[SearchResult, ...] = ()

    def to_dict(self) -> dict:
        """Serialize to the {"SearchTerm", "Results"} response shape."""
        return {
            "SearchTerm": self.search_term,
            "Results": [result.to_dict() for result in self.results]
        }


if __name__ == "__main__":
    book = Book.from_dict({
        "Title": "Twenty Thousand Leagues Under the Sea",
        "ISBN": "9780000528531",
        "Content": [
            {"Page": 31, "Line": 8, "Text": "now simply went on by her own momentum.  The dark-"},
            {"Page": 31, "Line": 9, "Text": "ness was then profound; and however good the Canadian's"}
        ]
    })
    print(f"Book: {book.title} ({len(book.content)} lines)")

    response = SearchResponse(
        search_term="darkness",
        results=(SearchResult(isbn=book.isbn, page=31, line=8),)
    )
    print(f"Response: {response.to_dict()}")
