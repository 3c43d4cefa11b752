"""Serialisation of index collections back into the generator's artifact format."""

import json
import logging
from pathlib import Path

from documenter_search_index.models import IndexCollection

logger = logging.getLogger(__name__)


class SearchIndexWriter:
    """Writes IndexCollection instances as Documenter search index artifacts."""

    VARIABLE_NAME = "documenterSearchIndex"
    DOCS_KEY = "docs"
    ENCODING = "utf-8"

    def dumps(self, collection: IndexCollection) -> str:
        """Render a collection as ``search_index.js`` text.

        Args:
            collection: Records to render.

        Returns:
            JavaScript source binding the index to ``VARIABLE_NAME``.
        """
        docs = json.dumps(collection.to_dicts(), separators=(",", ":"), ensure_ascii=False)
        return f"var {self.VARIABLE_NAME} = {{{json.dumps(self.DOCS_KEY)}:\n{docs}\n}}\n"

    def dumps_json(self, collection: IndexCollection) -> str:
        """Render a collection as bare JSON."""
        return json.dumps({self.DOCS_KEY: collection.to_dicts()}, separators=(",", ":"), ensure_ascii=False)

    def write(self, collection: IndexCollection, path: Path | str) -> Path:
        """Write a collection to disk in artifact format.

        Args:
            collection: Records to write.
            path: Destination file path.

        Returns:
            The path written to.
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.dumps(collection), encoding=self.ENCODING)
        logger.info("Wrote %d search index records to %s", len(collection), file_path)
        return file_path
