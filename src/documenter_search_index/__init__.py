"""Load, validate and re-serialise Documenter search index artifacts."""

from documenter_search_index.loader import MalformedIndexError, SearchIndexLoader, iterate, load
from documenter_search_index.models import (
    CATEGORY_METHOD,
    CATEGORY_PAGE,
    CATEGORY_SECTION,
    IndexCollection,
    IndexRecord,
)
from documenter_search_index.writer import SearchIndexWriter

__all__ = [
    "CATEGORY_METHOD",
    "CATEGORY_PAGE",
    "CATEGORY_SECTION",
    "IndexCollection",
    "IndexRecord",
    "MalformedIndexError",
    "SearchIndexLoader",
    "SearchIndexWriter",
    "iterate",
    "load",
]
