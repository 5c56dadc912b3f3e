"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Pure components are tested directly with in-memory stores
- mutagen objects are replaced by plain dicts / MagicMock
- Filesystem tests use tmp_path
"""

from __future__ import annotations

import logging
import os
from collections.abc import Generator

import pytest

from songtags.helpers.dto.song_dto import AudioFormat, Song
from songtags.helpers.dto.tags_dto import TagSet, TagValueStore
from songtags.helpers.tag_kinds import TagKind


@pytest.fixture
def empty_store() -> TagValueStore:
    """Store without any values."""
    return TagValueStore()


@pytest.fixture
def jazz_store() -> TagValueStore:
    """Store of a typical multi-artist jazz track."""
    store = TagValueStore()
    store.add_value_dedup(TagKind.ARTIST, "Miles Davis")
    store.add_value_dedup(TagKind.ARTIST, "John Coltrane")
    store.add_value_dedup(TagKind.ALBUM, "Kind of Blue")
    store.add_value_dedup(TagKind.TITLE, "So What")
    store.add_value_dedup(TagKind.GENRE, "Jazz")
    store.add_value_dedup(TagKind.TRACK, "1")
    return store


@pytest.fixture
def jazz_song(jazz_store: TagValueStore) -> Song:
    """Song wrapping jazz_store."""
    return Song(
        uri="Miles Davis/Kind of Blue/01 So What.flac",
        tags=jazz_store,
        duration=545,
        last_modified=1614834367,
        audio_format=AudioFormat(sample_rate=44100, bits=16, channels=2),
    )


@pytest.fixture
def default_allowed() -> TagSet:
    """Capability set of a typical server."""
    return TagSet(
        (
            TagKind.ARTIST,
            TagKind.ALBUM,
            TagKind.ALBUM_ARTIST,
            TagKind.TITLE,
            TagKind.TRACK,
            TagKind.NAME,
            TagKind.GENRE,
            TagKind.DATE,
            TagKind.DISC,
        )
    )


@pytest.fixture
def isolated_config(tmp_path, monkeypatch) -> Generator[None, None, None]:
    """Run with cwd in tmp_path and no SONGTAGS_* environment variables."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("SONGTAGS_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def _reset_logging_level() -> Generator[None, None, None]:
    """Keep log level changes from leaking between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a fast, isolated unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test (touches the filesystem)")
