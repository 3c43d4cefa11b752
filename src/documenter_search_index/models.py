"""Data models for Documenter search index artifacts."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

CATEGORY_PAGE = "page"
CATEGORY_SECTION = "section"
CATEGORY_METHOD = "method"


@dataclass(frozen=True, kw_only=True)
class IndexRecord:
    """Represents one documentation fragment in the search index."""

    location: str
    page: str
    title: str
    text: str = ""
    category: str

    @property
    def path(self) -> str:
        """Return the page-relative path part of the location."""
        return self.location.partition("#")[0]

    @property
    def anchor(self) -> str:
        """Return the anchor part of the location, or an empty string."""
        return self.location.partition("#")[2]

    def to_dict(self) -> dict[str, str]:
        """Return the record as a mapping in the generator's key order.

        Returns:
            Dictionary with location, page, title, text and category keys.
        """
        return {
            "location": self.location,
            "page": self.page,
            "title": self.title,
            "text": self.text,
            "category": self.category,
        }


@dataclass(frozen=True)
class IndexCollection(Sequence[IndexRecord]):
    """Ordered, read-only collection of index records."""

    records: tuple[IndexRecord, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "records", tuple(self.records))

    def iterate(self) -> Iterator[IndexRecord]:
        """Return a fresh iterator over the records in stored order."""
        return iter(self.records)

    def __iter__(self) -> Iterator[IndexRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @overload
    def __getitem__(self, index: int) -> IndexRecord: ...

    @overload
    def __getitem__(self, index: slice) -> "IndexCollection": ...

    def __getitem__(self, index: int | slice) -> "IndexRecord | IndexCollection":
        if isinstance(index, slice):
            return IndexCollection(self.records[index])
        return self.records[index]

    def __contains__(self, item: object) -> bool:
        return item in self.records

    def pages(self) -> list[str]:
        """Return distinct page names in order of first appearance."""
        return list(dict.fromkeys(record.page for record in self.records))

    def categories(self) -> list[str]:
        """Return distinct categories in order of first appearance."""
        return list(dict.fromkeys(record.category for record in self.records))

    def for_page(self, page: str) -> "IndexCollection":
        """Return the records belonging to a single page.

        Args:
            page: Page name as stored in the records.

        Returns:
            New IndexCollection holding the page's records in stored order.
        """
        return IndexCollection(tuple(record for record in self.records if record.page == page))

    def to_dicts(self) -> list[dict[str, str]]:
        """Return all records as plain mappings."""
        return [record.to_dict() for record in self.records]
