"""Tests for writing search index artifacts."""

from pathlib import Path

import pytest

from documenter_search_index.loader import SearchIndexLoader
from documenter_search_index.models import IndexCollection, IndexRecord
from documenter_search_index.writer import SearchIndexWriter

FIXTURE_PATH = Path(__file__).parent / "fixtures" / "search_index.js"


@pytest.fixture
def writer() -> SearchIndexWriter:
    """Create a SearchIndexWriter instance.

    Returns:
        SearchIndexWriter instance.
    """
    return SearchIndexWriter()


@pytest.fixture
def loader() -> SearchIndexLoader:
    """Create a SearchIndexLoader instance.

    Returns:
        SearchIndexLoader instance.
    """
    return SearchIndexLoader()


def test_dumps_reproduces_generated_artifact(writer: SearchIndexWriter, loader: SearchIndexLoader) -> None:
    """Test that re-serialising a generated artifact reproduces it exactly."""
    original = FIXTURE_PATH.read_text(encoding="utf-8")

    assert writer.dumps(loader.load(original)) == original


def test_round_trip(writer: SearchIndexWriter, loader: SearchIndexLoader) -> None:
    """Test that load, dump and reload yields an equal collection."""
    collection = loader.load(FIXTURE_PATH)

    assert loader.load(writer.dumps(collection)) == collection
    assert loader.load(writer.dumps_json(collection)) == collection


def test_round_trip_preserves_unicode_and_escapes(writer: SearchIndexWriter, loader: SearchIndexLoader) -> None:
    """Test that special characters survive a round trip."""
    collection = IndexCollection(
        (
            IndexRecord(
                location="theory/#Équations",
                page="Théorie",
                title="Équations",
                text='E = mc²\n"quoted" \\ backslash </script>',
                category="section",
            ),
        )
    )

    rendered = writer.dumps(collection)

    assert "Théorie" in rendered
    assert loader.load(rendered) == collection


def test_dumps_empty_collection(writer: SearchIndexWriter, loader: SearchIndexLoader) -> None:
    """Test rendering an empty collection."""
    rendered = writer.dumps(IndexCollection())

    assert rendered == 'var documenterSearchIndex = {"docs":\n[]\n}\n'
    assert len(loader.load(rendered)) == 0


def test_dumps_json(writer: SearchIndexWriter) -> None:
    """Test rendering bare JSON."""
    collection = IndexCollection((IndexRecord(location="", page="Home", title="Home", category="page"),))

    assert writer.dumps_json(collection) == (
        '{"docs":[{"location":"","page":"Home","title":"Home","text":"","category":"page"}]}'
    )


def test_write_creates_file(writer: SearchIndexWriter, loader: SearchIndexLoader, tmp_path: Path) -> None:
    """Test writing an artifact to a nested path."""
    collection = loader.load(FIXTURE_PATH)
    target = tmp_path / "build" / "search_index.js"

    written = writer.write(collection, target)

    assert written == target
    assert target.exists()
    assert loader.load(target) == collection


def test_write_accepts_string_path(writer: SearchIndexWriter, loader: SearchIndexLoader, tmp_path: Path) -> None:
    """Test writing an artifact to a path given as a string."""
    target = tmp_path / "out" / "search_index.js"

    written = writer.write(IndexCollection(), str(target))

    assert written == target
    assert len(loader.load(target)) == 0
