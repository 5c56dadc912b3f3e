"""
Tag normalization component for cross-format metadata standardization.

Maps format-specific tag names (MP4 atoms, ID3 frames, Vorbis comments) onto
TagKind members, keeping every value as its own list entry so multi-valued
fields survive intact.

Everything without a TagKind counterpart (cover art, lyrics, ReplayGain,
encoder settings, ...) is discarded.
"""

from __future__ import annotations

from typing import Any

from songtags.helpers.tag_kinds import TagKind

# Vorbis comment keys (case-insensitive) to tag kinds
VORBIS_TAG_MAP: dict[str, TagKind] = {
    "ARTIST": TagKind.ARTIST,
    "ARTISTSORT": TagKind.ARTIST_SORT,
    "ALBUM": TagKind.ALBUM,
    "ALBUMSORT": TagKind.ALBUM_SORT,
    "ALBUMARTIST": TagKind.ALBUM_ARTIST,
    "ALBUM ARTIST": TagKind.ALBUM_ARTIST,
    "ALBUMARTISTSORT": TagKind.ALBUM_ARTIST_SORT,
    "TITLE": TagKind.TITLE,
    "TRACKNUMBER": TagKind.TRACK,
    "GENRE": TagKind.GENRE,
    "DATE": TagKind.DATE,
    "ORIGINALDATE": TagKind.ORIGINAL_DATE,
    "COMPOSER": TagKind.COMPOSER,
    "COMPOSERSORT": TagKind.COMPOSER_SORT,
    "PERFORMER": TagKind.PERFORMER,
    "CONDUCTOR": TagKind.CONDUCTOR,
    "WORK": TagKind.WORK,
    "ENSEMBLE": TagKind.ENSEMBLE,
    "MOVEMENTNAME": TagKind.MOVEMENT,
    "MOVEMENT": TagKind.MOVEMENTNUMBER,
    "LOCATION": TagKind.LOCATION,
    "GROUPING": TagKind.GROUPING,
    "COMMENT": TagKind.COMMENT,
    "DISCNUMBER": TagKind.DISC,
    "LABEL": TagKind.LABEL,
    "ORGANIZATION": TagKind.LABEL,
    "MUSICBRAINZ_ARTISTID": TagKind.MUSICBRAINZ_ARTISTID,
    "MUSICBRAINZ_ALBUMID": TagKind.MUSICBRAINZ_ALBUMID,
    "MUSICBRAINZ_ALBUMARTISTID": TagKind.MUSICBRAINZ_ALBUMARTISTID,
    "MUSICBRAINZ_TRACKID": TagKind.MUSICBRAINZ_TRACKID,
    "MUSICBRAINZ_RELEASETRACKID": TagKind.MUSICBRAINZ_RELEASETRACKID,
    "MUSICBRAINZ_WORKID": TagKind.MUSICBRAINZ_WORKID,
}

# ID3 frames to tag kinds
ID3_TAG_MAP: dict[str, TagKind] = {
    "TPE1": TagKind.ARTIST,
    "TSOP": TagKind.ARTIST_SORT,
    "TALB": TagKind.ALBUM,
    "TSOA": TagKind.ALBUM_SORT,
    "TPE2": TagKind.ALBUM_ARTIST,
    "TSO2": TagKind.ALBUM_ARTIST_SORT,
    "TIT2": TagKind.TITLE,
    "TRCK": TagKind.TRACK,
    "TCON": TagKind.GENRE,
    "TDRC": TagKind.DATE,
    "TYER": TagKind.DATE,  # ID3v2.3
    "TDOR": TagKind.ORIGINAL_DATE,
    "TCOM": TagKind.COMPOSER,
    "TSOC": TagKind.COMPOSER_SORT,
    "TPE3": TagKind.CONDUCTOR,
    "TIT1": TagKind.GROUPING,
    "MVNM": TagKind.MOVEMENT,
    "MVIN": TagKind.MOVEMENTNUMBER,
    "TPOS": TagKind.DISC,
    "TPUB": TagKind.LABEL,
    "COMM": TagKind.COMMENT,
}

# ID3 TXXX descriptions (case-insensitive) to tag kinds, as written by MusicBrainz Picard
ID3_TXXX_MAP: dict[str, TagKind] = {
    "MUSICBRAINZ ARTIST ID": TagKind.MUSICBRAINZ_ARTISTID,
    "MUSICBRAINZ ALBUM ID": TagKind.MUSICBRAINZ_ALBUMID,
    "MUSICBRAINZ ALBUM ARTIST ID": TagKind.MUSICBRAINZ_ALBUMARTISTID,
    "MUSICBRAINZ RELEASE TRACK ID": TagKind.MUSICBRAINZ_RELEASETRACKID,
    "MUSICBRAINZ WORK ID": TagKind.MUSICBRAINZ_WORKID,
    "PERFORMER": TagKind.PERFORMER,
    "WORK": TagKind.WORK,
    "ENSEMBLE": TagKind.ENSEMBLE,
    "LOCATION": TagKind.LOCATION,
}

# MusicBrainz recording id lives in a UFID frame owned by this url
ID3_UFID_MUSICBRAINZ = "UFID:http://musicbrainz.org"

# MP4 atoms to tag kinds
MP4_TAG_MAP: dict[str, TagKind] = {
    "\xa9ART": TagKind.ARTIST,
    "soar": TagKind.ARTIST_SORT,
    "\xa9alb": TagKind.ALBUM,
    "soal": TagKind.ALBUM_SORT,
    "aART": TagKind.ALBUM_ARTIST,
    "soaa": TagKind.ALBUM_ARTIST_SORT,
    "\xa9nam": TagKind.TITLE,
    "trkn": TagKind.TRACK,  # Note: MP4 track is tuple (track, total)
    "\xa9gen": TagKind.GENRE,
    "\xa9day": TagKind.DATE,
    "\xa9wrt": TagKind.COMPOSER,
    "soco": TagKind.COMPOSER_SORT,
    "\xa9grp": TagKind.GROUPING,
    "\xa9wrk": TagKind.WORK,
    "\xa9mvn": TagKind.MOVEMENT,
    "\xa9mvi": TagKind.MOVEMENTNUMBER,
    "\xa9cmt": TagKind.COMMENT,
    "disk": TagKind.DISC,  # Note: MP4 disc is tuple (disc, total)
}

MP4_FREEFORM_PREFIX = "----:com.apple.iTunes:"

# MP4 freeform iTunes tags (case-insensitive names after the prefix)
MP4_FREEFORM_MAP: dict[str, TagKind] = {
    "MUSICBRAINZ ARTIST ID": TagKind.MUSICBRAINZ_ARTISTID,
    "MUSICBRAINZ ALBUM ID": TagKind.MUSICBRAINZ_ALBUMID,
    "MUSICBRAINZ ALBUM ARTIST ID": TagKind.MUSICBRAINZ_ALBUMARTISTID,
    "MUSICBRAINZ TRACK ID": TagKind.MUSICBRAINZ_TRACKID,
    "MUSICBRAINZ RELEASE TRACK ID": TagKind.MUSICBRAINZ_RELEASETRACKID,
    "MUSICBRAINZ WORK ID": TagKind.MUSICBRAINZ_WORKID,
    "ORIGINALDATE": TagKind.ORIGINAL_DATE,
    "LABEL": TagKind.LABEL,
    "CONDUCTOR": TagKind.CONDUCTOR,
    "PERFORMER": TagKind.PERFORMER,
    "ENSEMBLE": TagKind.ENSEMBLE,
    "LOCATION": TagKind.LOCATION,
}


def normalize_vorbis_tags(tags: Any) -> dict[TagKind, list[str]]:
    """
    Normalize Vorbis comments (FLAC, Ogg, Opus) to tag kinds.

    Args:
        tags: Vorbis comments dict-like object from mutagen

    Returns:
        Dict of kind -> values in file order
    """
    normalized: dict[TagKind, list[str]] = {}

    for key, value in tags.items():
        # Vorbis comments are case-insensitive
        kind = VORBIS_TAG_MAP.get(str(key).upper())
        if kind is not None:
            _extend(normalized, kind, _serialize_values(value))

    return normalized


def normalize_id3_tags(tags: Any) -> dict[TagKind, list[str]]:
    """
    Normalize ID3 frames (MP3, AIFF, WAV) to tag kinds.

    Handles plain text frames, TXXX user frames keyed by description,
    COMM frames ("COMM:desc:lang") and the MusicBrainz UFID frame.

    Args:
        tags: ID3 tags dict-like object from mutagen

    Returns:
        Dict of kind -> values in file order
    """
    normalized: dict[TagKind, list[str]] = {}

    for key, value in tags.items():
        if not isinstance(key, str):
            continue

        if key.startswith("TXXX:"):
            kind = ID3_TXXX_MAP.get(key[5:].upper())
            if kind is not None:
                _extend(normalized, kind, _serialize_values(value))
            continue

        if key == ID3_UFID_MUSICBRAINZ:
            data = getattr(value, "data", b"")
            _extend(normalized, TagKind.MUSICBRAINZ_TRACKID, _serialize_values(data))
            continue

        frame_type = key[:4]
        kind = ID3_TAG_MAP.get(frame_type)
        if kind is None:
            continue

        # TCON exposes resolved genre names ("(17)" -> "Rock")
        genres = getattr(value, "genres", None) if frame_type == "TCON" else None
        _extend(normalized, kind, _serialize_values(genres if genres else value))

    return normalized


def normalize_mp4_tags(tags: Any) -> dict[TagKind, list[str]]:
    """
    Normalize MP4/M4A atoms to tag kinds.

    Args:
        tags: MP4 tags dict-like object from mutagen

    Returns:
        Dict of kind -> values in file order
    """
    normalized: dict[TagKind, list[str]] = {}

    for key, value in tags.items():
        if not isinstance(key, str):
            continue

        if key.startswith(MP4_FREEFORM_PREFIX):
            kind = MP4_FREEFORM_MAP.get(key[len(MP4_FREEFORM_PREFIX) :].upper())
        else:
            kind = MP4_TAG_MAP.get(key)

        if kind is not None:
            _extend(normalized, kind, _serialize_values(value))

    return normalized


def _extend(normalized: dict[TagKind, list[str]], kind: TagKind, values: list[str]) -> None:
    """Append non-empty values to ``kind``'s list."""
    for value in values:
        if value:
            normalized.setdefault(kind, []).append(value)


def _serialize_values(value: Any) -> list[str]:
    """
    Serialize a tag value to a list of strings.

    Handles various mutagen types:
    - ID3 text frames: one entry per element of ``.text``
    - MP4 track/disc tuples: the number only
    - MP4FreeForm / bytes: decoded as UTF-8
    - Lists: flattened
    - Everything else: str()
    """
    if value is None:
        return []

    # MP4 track/disc tuples: (number, total)
    if isinstance(value, tuple) and len(value) >= 1 and all(isinstance(x, int) for x in value):
        return [str(value[0])] if value[0] > 0 else []

    if isinstance(value, list):
        serialized: list[str] = []
        for item in value:
            serialized.extend(_serialize_values(item))
        return serialized

    if isinstance(value, bytes):
        return [value.decode("utf-8", errors="replace").strip("\x00")]

    # ID3 text frames (have .text attribute)
    if hasattr(value, "text"):
        text_value = value.text
        if isinstance(text_value, list):
            return [str(t) for t in text_value]
        return [str(text_value)]

    return [str(value)]
