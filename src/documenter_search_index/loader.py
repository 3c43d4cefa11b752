"""Loader for Documenter search index artifacts (``search_index.js``)."""

import json
import logging
import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from documenter_search_index.models import IndexCollection, IndexRecord

logger = logging.getLogger(__name__)


class MalformedIndexError(ValueError):
    """Raised when a search index does not match the expected structure."""


class SearchIndexLoader:
    """Loads and validates Documenter search index artifacts."""

    VARIABLE_NAME = "documenterSearchIndex"
    DOCS_KEY = "docs"
    REQUIRED_FIELDS = ("location", "page", "title", "category")
    OPTIONAL_FIELDS = ("text",)
    ENCODING = "utf-8"

    _DECLARATION = re.compile(r"^\s*(?:var|let|const)\s+([A-Za-z_$][\w$]*)\s*=\s*")

    def load(self, source: Path | str | Mapping[str, Any] | list[Any]) -> IndexCollection:
        """Load a search index into an IndexCollection.

        Args:
            source: Path to an artifact file, artifact text, or decoded data
                (a list of records or a mapping with a ``docs`` list).

        Returns:
            IndexCollection with the records in stored order.

        Raises:
            MalformedIndexError: If the data violates the index structure.
        """
        if isinstance(source, Path):
            return self.load_file(source)

        if isinstance(source, str):
            logger.debug("Loading search index from text (%d characters)", len(source))
            data = self._decode(source)
        else:
            data = source

        docs = self._extract_docs(data)
        records = tuple(self._parse_record(index, item) for index, item in enumerate(docs))

        logger.info("Loaded %d search index records", len(records))
        return IndexCollection(records)

    def load_file(self, path: Path | str) -> IndexCollection:
        """Load a search index artifact from disk.

        Args:
            path: Path to the ``search_index.js`` (or JSON) file.

        Returns:
            IndexCollection with the records in stored order.
        """
        file_path = Path(path)
        logger.debug("Loading search index from %s", file_path)
        return self.load(file_path.read_text(encoding=self.ENCODING))

    def iterate(self, source: Path | str | Mapping[str, Any] | list[Any]) -> Iterator[IndexRecord]:
        """Load a search index and return an iterator over its records."""
        return self.load(source).iterate()

    def _decode(self, text: str) -> Any:
        """Decode artifact text into Python data.

        Accepts the generated ``var documenterSearchIndex = {...}`` form as
        well as bare JSON.

        Args:
            text: Artifact text.

        Returns:
            Decoded JSON value.

        Raises:
            MalformedIndexError: If the text cannot be decoded.
        """
        payload = text
        match = self._DECLARATION.match(text)
        if match:
            if match.group(1) != self.VARIABLE_NAME:
                logger.debug("Search index bound to unexpected variable %r", match.group(1))
            payload = text[match.end() :]

        payload = payload.strip().removesuffix(";").rstrip()
        if not payload:
            msg = "Search index is empty"
            raise MalformedIndexError(msg)

        try:
            return json.loads(payload)
        except (json.JSONDecodeError, RecursionError) as exc:
            msg = f"Search index is not valid JSON: {exc}"
            raise MalformedIndexError(msg) from exc

    def _extract_docs(self, data: Any) -> list[Any]:
        """Return the array of records from decoded index data.

        Args:
            data: Decoded top-level value.

        Returns:
            The list of raw records.

        Raises:
            MalformedIndexError: If no records array is present.
        """
        if isinstance(data, Mapping):
            if self.DOCS_KEY not in data:
                msg = f"Search index object has no {self.DOCS_KEY!r} key. Found keys: {list(data.keys())}"
                raise MalformedIndexError(msg)
            data = data[self.DOCS_KEY]

        if not isinstance(data, list):
            msg = f"Search index records must be an array, got {type(data).__name__}"
            raise MalformedIndexError(msg)
        return data

    def _parse_record(self, index: int, item: Any) -> IndexRecord:
        """Validate a raw record and convert it to an IndexRecord.

        Args:
            index: Position of the record in the array.
            item: Raw decoded record.

        Returns:
            IndexRecord instance.

        Raises:
            MalformedIndexError: If the record is not an object or a field is
                missing or not a string.
        """
        if not isinstance(item, Mapping):
            msg = f"Invalid record at index {index}: expected object, got {type(item).__name__}"
            raise MalformedIndexError(msg)

        values: dict[str, str] = {}
        for name in self.REQUIRED_FIELDS:
            if name not in item:
                msg = f"Invalid record at index {index}: missing {name!r} field"
                raise MalformedIndexError(msg)
            values[name] = self._string_field(index, name, item[name])

        for name in self.OPTIONAL_FIELDS:
            value = item.get(name)
            values[name] = "" if value is None else self._string_field(index, name, value)

        extra = set(item) - set(self.REQUIRED_FIELDS) - set(self.OPTIONAL_FIELDS)
        if extra:
            logger.debug("Ignoring unknown fields %s on record %d", sorted(map(str, extra)), index)

        return IndexRecord(**values)

    @staticmethod
    def _string_field(index: int, name: str, value: Any) -> str:
        if not isinstance(value, str):
            msg = f"Invalid record at index {index}: {name!r} must be a string, got {type(value).__name__}"
            raise MalformedIndexError(msg)
        return value


_default_loader = SearchIndexLoader()


def load(source: Path | str | Mapping[str, Any] | list[Any]) -> IndexCollection:
    """Load a search index with the default loader."""
    return _default_loader.load(source)


def iterate(source: Path | str | Mapping[str, Any] | list[Any]) -> Iterator[IndexRecord]:
    """Iterate a search index with the default loader."""
    return _default_loader.iterate(source)
