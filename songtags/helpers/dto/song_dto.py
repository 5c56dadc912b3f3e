"""Song DTOs - catalog item and its audio format.

Rules:
- Pure data structures only (no I/O, no business logic)
- Zero means "unknown" for every numeric field
"""

from __future__ import annotations

from dataclasses import dataclass, field

from songtags.helpers.dto.tags_dto import TagValueStore


@dataclass(frozen=True)
class AudioFormat:
    """Sample rate, bit depth and channel count of a song (0 = unknown)."""

    sample_rate: int = 0
    bits: int = 0
    channels: int = 0


@dataclass(frozen=True)
class Song:
    """Catalog item: unique uri plus the tag store built during ingestion."""

    uri: str
    tags: TagValueStore = field(default_factory=TagValueStore)
    duration: int = 0  # whole seconds
    last_modified: int = 0  # epoch seconds
    audio_format: AudioFormat | None = None
