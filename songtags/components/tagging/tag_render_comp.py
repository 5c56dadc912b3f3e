"""
Tag rendering component - display strings and JSON fragments.

Two encodings of a TagValueStore share one fallback policy:
- Title with no values falls back to Name, then to the uri's filename.
- Any other kind with no values renders as nothing (display form) or as
  the "-" placeholder (JSON form): "-" for single-valued kinds, ["-"] for
  multi-valued kinds.

JSON output is built in local buffers and only returned once complete, so a
kind without values never yields a dangling "[" or quote.

Record fragments are comma-separated "key":value members without the
enclosing braces; the response layer embeds them in its own objects.
"""

from __future__ import annotations

from songtags.helpers.dto.song_dto import AudioFormat, Song
from songtags.helpers.dto.tags_dto import TagSet, TagValueStore
from songtags.helpers.files import basename_uri
from songtags.helpers.json_helper import json_field, json_string, json_string_plain
from songtags.helpers.tag_kinds import MUSICBRAINZ_ARTIST_KINDS, TagKind, is_multivalue, tag_name

PLACEHOLDER = "-"
_PLACEHOLDER_SINGLE = json_string(PLACEHOLDER)
_PLACEHOLDER_MULTI = f"[{_PLACEHOLDER_SINGLE}]"


# ----------------------------------------------------------------------
# Display form
# ----------------------------------------------------------------------


def join_values(store: TagValueStore, kind: TagKind) -> tuple[str, int]:
    """Join the values of ``kind`` with ", " and report how many were joined."""
    values = store.values(kind)
    return ", ".join(values), len(values)


def render_display(store: TagValueStore, kind: TagKind, uri: str) -> tuple[str, int]:
    """
    Render a tag as a flat display string.

    Args:
        store: Tag values of the item
        kind: Kind to render
        uri: Item uri (filename fallback for Title)

    Returns:
        (text, value_count). For Title without Title or Name values the
        text is the uri's filename and the count is 1. For other empty
        kinds the result is ("", 0).
    """
    text, count = join_values(store, kind)
    if count == 0 and kind == TagKind.TITLE:
        text, count = join_values(store, TagKind.NAME)
        if count == 0:
            return basename_uri(uri), 1
    return text, count


# ----------------------------------------------------------------------
# JSON form
# ----------------------------------------------------------------------


def _split_musicbrainz_ids(value: str) -> list[str]:
    """Split a ';'-joined identifier list, stripping whitespace around each segment."""
    return [segment.strip() for segment in value.split(";")]


def _json_values(store: TagValueStore, kind: TagKind, multi: bool) -> tuple[str, int]:
    """
    Encode the values of ``kind`` as a JSON array (multi) or string.

    Returns:
        (encoded, count); encoded is "" when count is 0.
    """
    values = list(store.values(kind))
    if multi:
        if kind in MUSICBRAINZ_ARTIST_KINDS and len(values) == 1:
            # Some servers pack several ids into one ';'-joined value
            values = _split_musicbrainz_ids(values[0])
        if not values:
            return "", 0
        return "[" + ",".join(json_string(value) for value in values) + "]", len(values)

    if not values:
        return "", 0
    return '"' + ", ".join(json_string_plain(value) for value in values) + '"', len(values)


def render_json(store: TagValueStore, kind: TagKind, uri: str) -> str:
    """
    Render a tag as a JSON value.

    Multi-valued kinds yield an array, others a single string joining all
    values with ", ". Empty kinds fall back as described in the module
    docstring, so the result is always a well-formed JSON token.

    Args:
        store: Tag values of the item
        kind: Kind to render
        uri: Item uri (filename fallback for Title)

    Returns:
        Encoded JSON value
    """
    multi = is_multivalue(kind)
    encoded, count = _json_values(store, kind, multi)
    if count > 0:
        return encoded

    if kind == TagKind.TITLE:
        encoded, count = _json_values(store, TagKind.NAME, multi)
        if count > 0:
            return encoded
        return json_string(basename_uri(uri))

    return _PLACEHOLDER_MULTI if multi else _PLACEHOLDER_SINGLE


def _title_field(store: TagValueStore, uri: str) -> str:
    return json_field(tag_name(TagKind.TITLE), render_json(store, TagKind.TITLE, uri))


# ----------------------------------------------------------------------
# Records
# ----------------------------------------------------------------------


def render_record(
    store: TagValueStore,
    enabled: TagSet,
    uri: str,
    duration: int,
    last_modified: int,
    audio_format: AudioFormat | None = None,
    tags_enabled: bool = True,
) -> str:
    """
    Render the JSON members describing one song.

    Args:
        store: Tag values of the song
        enabled: Kinds to emit, in order
        uri: Song uri
        duration: Duration in whole seconds (negative values clamp to 0)
        last_modified: Modification time, epoch seconds
        audio_format: Emitted as an "AudioFormat" member before Duration when given
        tags_enabled: False when the server reports no tags at all; only
            Title (via its fallback chain) is emitted then

    Returns:
        Comma-separated members ending with Duration, LastModified and uri

    Example:
        >>> render_record(store, TagSet((TagKind.TITLE,)), "a/song.flac", 120, 0)
        '"Title":"song.flac","Duration":120,"LastModified":0,"uri":"a/song.flac"'
    """
    members: list[str] = []
    if tags_enabled:
        for kind in enabled:
            members.append(json_field(tag_name(kind), render_json(store, kind, uri)))
    else:
        members.append(_title_field(store, uri))

    if audio_format is not None:
        members.append(render_audio_format(audio_format))
    members.append(json_field("Duration", str(max(int(duration), 0))))
    members.append(json_field("LastModified", str(int(last_modified))))
    members.append(json_field("uri", json_string(uri)))
    return ",".join(members)


def render_song(song: Song, enabled: TagSet, tags_enabled: bool = True) -> str:
    """Render the record members of a Song (see render_record)."""
    return render_record(
        song.tags,
        enabled,
        song.uri,
        song.duration,
        song.last_modified,
        audio_format=song.audio_format,
        tags_enabled=tags_enabled,
    )


def render_absent_record(enabled: TagSet, uri: str, tags_enabled: bool = True) -> str:
    """
    Render record members for a song whose tags could not be loaded.

    Same shape as render_record: Title is the uri's filename, every other
    kind is the placeholder, Duration and LastModified are 0.
    """
    filename = json_string(basename_uri(uri))
    members: list[str] = []
    if tags_enabled:
        for kind in enabled:
            encoded = filename if kind == TagKind.TITLE else _PLACEHOLDER_SINGLE
            if is_multivalue(kind):
                encoded = f"[{encoded}]"
            members.append(json_field(tag_name(kind), encoded))
    else:
        members.append(json_field(tag_name(TagKind.TITLE), filename))

    members.append(json_field("Duration", "0"))
    members.append(json_field("LastModified", "0"))
    members.append(json_field("uri", json_string(uri)))
    return ",".join(members)


def render_audio_format(audio_format: AudioFormat | None) -> str:
    """Render the "AudioFormat" member; a missing format renders as zeros."""
    fmt = audio_format or AudioFormat()
    body = ",".join(
        [
            json_field("sampleRate", str(int(fmt.sample_rate))),
            json_field("bits", str(int(fmt.bits))),
            json_field("channels", str(int(fmt.channels))),
        ]
    )
    return json_field("AudioFormat", "{" + body + "}")


def render_object(*fragments: str) -> str:
    """Wrap one or more member fragments in braces to form a JSON object."""
    return "{" + ",".join(fragment for fragment in fragments if fragment) + "}"
