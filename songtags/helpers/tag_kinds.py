"""Tag kind enumeration and static classification.

Tag kinds are numbered like the media server's protocol enumeration so that
values received over the wire map 1:1 onto TagKind members.

Classification tables (multi-value kinds, sort aliases, protocol names) are
constant data. Nothing here is configurable at runtime.

Examples:
    is_multivalue(TagKind.GENRE) → True
    sort_alias(TagKind.ALBUM) → TagKind.ALBUM_SORT
    parse_tag_name("albumartist") → TagKind.ALBUM_ARTIST
"""

from __future__ import annotations

from enum import IntEnum


class TagKind(IntEnum):
    """Metadata field identifier."""

    ARTIST = 0
    ALBUM = 1
    ALBUM_ARTIST = 2
    TITLE = 3
    TRACK = 4
    NAME = 5
    GENRE = 6
    DATE = 7
    COMPOSER = 8
    PERFORMER = 9
    COMMENT = 10
    DISC = 11
    MUSICBRAINZ_ARTISTID = 12
    MUSICBRAINZ_ALBUMID = 13
    MUSICBRAINZ_ALBUMARTISTID = 14
    MUSICBRAINZ_TRACKID = 15
    MUSICBRAINZ_RELEASETRACKID = 16
    ORIGINAL_DATE = 17
    ARTIST_SORT = 18
    ALBUM_ARTIST_SORT = 19
    ALBUM_SORT = 20
    LABEL = 21
    MUSICBRAINZ_WORKID = 22
    GROUPING = 23
    WORK = 24
    CONDUCTOR = 25
    COMPOSER_SORT = 26
    ENSEMBLE = 27
    MOVEMENT = 28
    MOVEMENTNUMBER = 29
    LOCATION = 30


# Maximum number of distinct kinds (capacity bound for TagSet)
TAG_COUNT = len(TagKind)

# Protocol names, as reported by the server and used as JSON keys
TAG_NAMES: dict[TagKind, str] = {
    TagKind.ARTIST: "Artist",
    TagKind.ALBUM: "Album",
    TagKind.ALBUM_ARTIST: "AlbumArtist",
    TagKind.TITLE: "Title",
    TagKind.TRACK: "Track",
    TagKind.NAME: "Name",
    TagKind.GENRE: "Genre",
    TagKind.DATE: "Date",
    TagKind.COMPOSER: "Composer",
    TagKind.PERFORMER: "Performer",
    TagKind.COMMENT: "Comment",
    TagKind.DISC: "Disc",
    TagKind.MUSICBRAINZ_ARTISTID: "MUSICBRAINZ_ARTISTID",
    TagKind.MUSICBRAINZ_ALBUMID: "MUSICBRAINZ_ALBUMID",
    TagKind.MUSICBRAINZ_ALBUMARTISTID: "MUSICBRAINZ_ALBUMARTISTID",
    TagKind.MUSICBRAINZ_TRACKID: "MUSICBRAINZ_TRACKID",
    TagKind.MUSICBRAINZ_RELEASETRACKID: "MUSICBRAINZ_RELEASETRACKID",
    TagKind.ORIGINAL_DATE: "OriginalDate",
    TagKind.ARTIST_SORT: "ArtistSort",
    TagKind.ALBUM_ARTIST_SORT: "AlbumArtistSort",
    TagKind.ALBUM_SORT: "AlbumSort",
    TagKind.LABEL: "Label",
    TagKind.MUSICBRAINZ_WORKID: "MUSICBRAINZ_WORKID",
    TagKind.GROUPING: "Grouping",
    TagKind.WORK: "Work",
    TagKind.CONDUCTOR: "Conductor",
    TagKind.COMPOSER_SORT: "ComposerSort",
    TagKind.ENSEMBLE: "Ensemble",
    TagKind.MOVEMENT: "Movement",
    TagKind.MOVEMENTNUMBER: "MovementNumber",
    TagKind.LOCATION: "Location",
}

# Case-insensitive reverse lookup
_NAME_LOOKUP: dict[str, TagKind] = {name.lower(): kind for kind, name in TAG_NAMES.items()}

# Kinds that conventionally carry more than one value per item
MULTIVALUE_KINDS: frozenset[TagKind] = frozenset(
    {
        TagKind.ARTIST,
        TagKind.ARTIST_SORT,
        TagKind.ALBUM_ARTIST,
        TagKind.ALBUM_ARTIST_SORT,
        TagKind.GENRE,
        TagKind.COMPOSER,
        TagKind.COMPOSER_SORT,
        TagKind.PERFORMER,
        TagKind.CONDUCTOR,
        TagKind.ENSEMBLE,
        TagKind.MUSICBRAINZ_ARTISTID,
        TagKind.MUSICBRAINZ_ALBUMARTISTID,
    }
)

# MusicBrainz identifier kinds that some servers pack into one ';'-joined value
MUSICBRAINZ_ARTIST_KINDS: frozenset[TagKind] = frozenset(
    {
        TagKind.MUSICBRAINZ_ARTISTID,
        TagKind.MUSICBRAINZ_ALBUMARTISTID,
    }
)

_SORT_ALIASES: dict[TagKind, TagKind] = {
    TagKind.ARTIST: TagKind.ARTIST_SORT,
    TagKind.ALBUM_ARTIST: TagKind.ALBUM_ARTIST_SORT,
    TagKind.ALBUM: TagKind.ALBUM_SORT,
    TagKind.COMPOSER: TagKind.COMPOSER_SORT,
}


def is_multivalue(kind: TagKind) -> bool:
    """Check if a tag kind conventionally carries more than one value.

    Args:
        kind: Tag kind to classify

    Returns:
        True for artist-like kinds, genre and the MusicBrainz artist ids.

    """
    return kind in MULTIVALUE_KINDS


def sort_alias(kind: TagKind) -> TagKind:
    """Return the kind holding the sort form of ``kind`` (identity if none)."""
    return _SORT_ALIASES.get(kind, kind)


def tag_name(kind: TagKind) -> str:
    """Return the protocol name of a tag kind (e.g. "AlbumArtist")."""
    return TAG_NAMES[TagKind(kind)]


def parse_tag_name(name: str) -> TagKind | None:
    """Resolve a tag name to its kind, ignoring case.

    Args:
        name: Tag name as written by a user or reported by the server

    Returns:
        Matching TagKind, or None if the name is unknown.

    """
    if not name:
        return None
    return _NAME_LOOKUP.get(name.lower())


def is_valid_kind(kind: object) -> bool:
    """Check that ``kind`` lies inside the TagKind enumeration."""
    if isinstance(kind, bool) or not isinstance(kind, int):
        return False
    return 0 <= kind < TAG_COUNT
