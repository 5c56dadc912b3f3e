"""Parsing of the media server's line protocol into Song records.

Responses are "key: value" lines terminated by "OK", or a single
"ACK [code@index] {command} message" line on error. Song listings start
each song with a "file: <uri>" line.

This module only parses text; sending commands is the session's job.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from songtags.helpers.dto.song_dto import AudioFormat, Song
from songtags.helpers.dto.tags_dto import TagSet, TagValueStore
from songtags.helpers.exceptions import MpdProtocolError
from songtags.helpers.tag_kinds import TagKind, parse_tag_name
from songtags.helpers.time_helper import parse_iso8601_epoch

logger = logging.getLogger(__name__)

_ACK_PATTERN = re.compile(r"^ACK \[(?P<code>\d+)@\d+\] \{(?P<command>[^}]*)\} ?(?P<message>.*)$")


@dataclass
class _SongBuilder:
    """Accumulates one song while its lines are read."""

    uri: str
    tags: TagValueStore = field(default_factory=TagValueStore)
    duration: int | None = None
    time: int = 0
    last_modified: int = 0
    audio_format: AudioFormat | None = None

    def build(self) -> Song:
        return Song(
            uri=self.uri,
            tags=self.tags,
            duration=self.duration if self.duration is not None else self.time,
            last_modified=self.last_modified,
            audio_format=self.audio_format,
        )


def split_pair(line: str) -> tuple[str, str] | None:
    """Split a "key: value" line; None for lines without the separator."""
    key, sep, value = line.partition(": ")
    if not sep or not key:
        return None
    return key, value


def check_ack(line: str) -> None:
    """
    Raise if ``line`` is an ACK error line.

    Raises:
        MpdProtocolError: With the server's error code, command and message
    """
    if not line.startswith("ACK "):
        return
    match = _ACK_PATTERN.match(line)
    if match is None:
        raise MpdProtocolError(0, "", line[4:])
    raise MpdProtocolError(int(match.group("code")), match.group("command"), match.group("message"))


def parse_audio_format(text: str) -> AudioFormat:
    """
    Parse a "samplerate:bits:channels" string (e.g. "44100:24:2").

    "*" and other non-numeric parts become 0; "f" (floating point) bits
    become 32.
    """
    parts = text.strip().split(":")
    while len(parts) < 3:
        parts.append("0")

    def _number(part: str) -> int:
        return int(part) if part.isdigit() else 0

    bits = 32 if parts[1] == "f" else _number(parts[1])
    return AudioFormat(sample_rate=_number(parts[0]), bits=bits, channels=_number(parts[2]))


def _parse_seconds(text: str) -> int:
    try:
        return max(int(float(text)), 0)
    except (ValueError, OverflowError):
        return 0


def parse_songs(lines: Iterable[str]) -> list[Song]:
    """
    Parse a song listing response into Song records.

    Args:
        lines: Response lines (with or without trailing newlines)

    Returns:
        Songs in response order; each store is complete when returned

    Raises:
        MpdProtocolError: If the response is an ACK error
    """
    songs: list[Song] = []
    current: _SongBuilder | None = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "OK":
            break
        check_ack(line)

        pair = split_pair(line)
        if pair is None:
            logger.debug(f"[MpdResponse] Ignoring malformed line {line!r}")
            continue
        key, value = pair

        if key == "file":
            if current is not None:
                songs.append(current.build())
            current = _SongBuilder(uri=value)
            continue

        if current is None:
            # Directory/playlist entries and status lines before the first song
            continue

        _apply_pair(current, key, value)

    if current is not None:
        songs.append(current.build())
    return songs


def parse_song_pairs(pairs: Iterable[tuple[str, str]]) -> Song | None:
    """Build a single Song from already split (key, value) pairs."""
    songs = parse_songs(f"{key}: {value}" for key, value in pairs)
    return songs[0] if songs else None


def _apply_pair(current: _SongBuilder, key: str, value: str) -> None:
    if key == "duration":
        current.duration = _parse_seconds(value)
    elif key == "Time":
        current.time = _parse_seconds(value)
    elif key == "Last-Modified":
        current.last_modified = parse_iso8601_epoch(value)
    elif key == "Format":
        current.audio_format = parse_audio_format(value)
    else:
        kind = parse_tag_name(key)
        if kind is not None:
            current.tags.add_value_dedup(kind, value)


def parse_tagtypes(lines: Iterable[str]) -> TagSet:
    """
    Parse a "tagtypes" response into the server's allowed TagSet.

    Args:
        lines: Response lines, e.g. ["tagtype: Artist", "tagtype: Album", "OK"]

    Returns:
        Kinds in server order, unknown names skipped

    Raises:
        MpdProtocolError: If the response is an ACK error
    """
    kinds: list[TagKind] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == "OK":
            break
        check_ack(line)
        pair = split_pair(line)
        if pair is None or pair[0] != "tagtype":
            continue
        kind = parse_tag_name(pair[1])
        if kind is None:
            logger.debug(f"[MpdResponse] Server tag {pair[1]!r} is not supported")
            continue
        if kind not in kinds:
            kinds.append(kind)
    return TagSet(tuple(kinds))
