"""
File system and uri helpers for catalog items.

Uris are catalog keys relative to the music directory ("Artist/Album/01.flac")
or absolute stream urls ("https://radio.example/stream#Radio Name").
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Supported audio file extensions
AUDIO_EXTENSIONS = {".mp3", ".m4a", ".mp4", ".flac", ".ogg", ".oga", ".wav", ".aac", ".opus", ".wv", ".ape"}


def is_stream_uri(uri: str) -> bool:
    """Check if a uri points to a stream (has a scheme like http://)."""
    return "://" in uri


def basename_uri(uri: str) -> str:
    """
    Derive a display filename from a catalog uri.

    Args:
        uri: Catalog uri

    Returns:
        For files, everything after the last path separator.
        For streams, the "#name" fragment if present, else the full uri.

    Examples:
        >>> basename_uri("/music/a/song.flac")
        "song.flac"

        >>> basename_uri("https://radio.example/live#Jazz FM")
        "Jazz FM"
    """
    if not uri:
        return uri
    if is_stream_uri(uri):
        _, sep, fragment = uri.partition("#")
        return fragment if sep and fragment else uri
    return uri.rstrip("/").rsplit("/", 1)[-1] or uri


def relative_uri(path: str | Path, music_directory: str | Path) -> str:
    """
    Convert an absolute file path into a catalog uri.

    Paths outside ``music_directory`` keep their absolute form so they
    remain unique keys.

    Args:
        path: File path
        music_directory: Configured music directory root

    Returns:
        Forward-slash separated uri
    """
    absolute = os.path.realpath(str(path))
    root = os.path.realpath(str(music_directory)) if music_directory else ""
    if root and (absolute == root or absolute.startswith(root + os.sep)):
        rel = os.path.relpath(absolute, root)
        return Path(rel).as_posix()
    logger.debug(f"[files] {absolute} is outside music directory {root!r}, keeping absolute uri")
    return Path(absolute).as_posix()


def collect_audio_files(paths: list[str] | str, recursive: bool = True) -> list[str]:
    """
    Collect audio files from one or more paths (files or directories).

    Args:
        paths: Single path string or list of path strings
        recursive: If True, recursively scan directories. If False, only immediate children.

    Returns:
        Sorted list of absolute paths to audio files (deduplicated).
    """
    # Normalize to list
    if isinstance(paths, str):
        paths = [paths]

    files = []
    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            logger.debug(f"[files] Skipping missing path: {path_str}")
            continue

        if path.is_file():
            if path.suffix.lower() in AUDIO_EXTENSIONS:
                files.append(str(path.resolve()))
        elif path.is_dir():
            pattern = path.rglob("*") if recursive else path.glob("*")
            files.extend(str(p.resolve()) for p in pattern if p.is_file() and p.suffix.lower() in AUDIO_EXTENSIONS)

    return sorted(set(files))


def is_audio_file(path: str) -> bool:
    """Check if the file extension is in AUDIO_EXTENSIONS."""
    return Path(path).suffix.lower() in AUDIO_EXTENSIONS
