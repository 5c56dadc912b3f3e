"""Tag reading operations - build Song records from local audio files."""

from __future__ import annotations

import logging
import os
from typing import Any

import mutagen  # type: ignore[import-untyped]
from mutagen.id3 import ID3
from mutagen.mp4 import MP4

from songtags.components.tagging.tag_normalization_comp import (
    normalize_id3_tags,
    normalize_mp4_tags,
    normalize_vorbis_tags,
)
from songtags.helpers.dto.song_dto import AudioFormat, Song
from songtags.helpers.dto.tags_dto import TagValueStore
from songtags.helpers.files import relative_uri
from songtags.helpers.tag_kinds import TagKind, tag_name

logger = logging.getLogger(__name__)


def read_song_from_file(path: str, music_directory: str) -> Song:
    """
    Read tags and stream info from an audio file.

    Args:
        path: Path to audio file
        music_directory: Music directory root, used to derive the song uri

    Returns:
        Song with a fully built TagValueStore

    Raises:
        ValueError: If file format is unsupported
        RuntimeError: If file cannot be read
    """
    try:
        audio = mutagen.File(path)  # type: ignore[attr-defined]
        if audio is None:
            raise ValueError(f"Unsupported audio format: {path}")

        store = build_tag_store(_normalize(audio))
        info = getattr(audio, "info", None)
        return Song(
            uri=relative_uri(path, music_directory),
            tags=store,
            duration=int(getattr(info, "length", 0) or 0),
            last_modified=int(os.path.getmtime(path)),
            audio_format=_audio_format(info),
        )

    except ValueError:
        raise
    except Exception as e:
        logger.exception(f"[TagReader] Failed to read tags from {path}")
        raise RuntimeError(f"Failed to read tags: {e}") from e


def build_tag_store(values_by_kind: dict[TagKind, list[str]]) -> TagValueStore:
    """
    Fill a fresh TagValueStore, dropping duplicate values per kind.

    Args:
        values_by_kind: Normalized values from one of the normalize_* functions

    Returns:
        Store ready to be published (not modified afterwards)
    """
    store = TagValueStore()
    for kind, values in values_by_kind.items():
        for value in values:
            if not store.add_value_dedup(kind, value):
                logger.debug(f"[TagReader] Skipped duplicate {tag_name(kind)} value {value!r}")
    return store


def _normalize(audio: Any) -> dict[TagKind, list[str]]:
    """Pick the normalizer matching the container's tag format."""
    tags = getattr(audio, "tags", None)
    if not tags:
        return {}

    # MP3/AIFF/WAV with ID3 frames
    if isinstance(tags, ID3) or hasattr(tags, "getall"):
        return normalize_id3_tags(tags)

    # MP4/M4A
    if isinstance(audio, MP4):
        return normalize_mp4_tags(tags)

    # Vorbis comments (FLAC, OGG, Opus)
    if hasattr(tags, "items"):
        return normalize_vorbis_tags(tags)

    logger.warning(f"[TagReader] No supported tag format in {type(audio).__name__}")
    return {}


def _audio_format(info: Any) -> AudioFormat | None:
    """Extract sample rate, bit depth and channels from mutagen stream info."""
    if info is None:
        return None
    return AudioFormat(
        sample_rate=int(getattr(info, "sample_rate", 0) or 0),
        bits=int(getattr(info, "bits_per_sample", 0) or 0),
        channels=int(getattr(info, "channels", 0) or 0),
    )
