"""Parsing of user-configured tag lists.

Turns "Artist, Album , Genre" into a TagSet, keeping only the kinds the media
server declared it can report.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from songtags.helpers.dto.tags_dto import TagSet
from songtags.helpers.tag_kinds import TAG_COUNT, TagKind, parse_tag_name, tag_name

logger = logging.getLogger(__name__)


def parse_enabled_tags(csv_text: str, allowed: TagSet, list_name: str = "tags") -> TagSet:
    """
    Parse a comma-separated tag list against the allowed kinds.

    Tokens are stripped and resolved case-insensitively:
    - unknown names are logged as warnings and skipped
    - kinds missing from ``allowed`` are logged at debug level and skipped
    - everything else is appended in input order

    Repeated names are appended repeatedly; callers that need a unique list
    must deduplicate. Tokens beyond TAG_COUNT kinds are dropped.

    Args:
        csv_text: User configuration, e.g. "Artist,Album,Title"
        allowed: Kinds the server can report
        list_name: Name used in the summary log line

    Returns:
        Resolved TagSet

    Example:
        >>> parse_enabled_tags("Artist, Album , Bogus", TagSet((ARTIST, ALBUM, GENRE)))
        TagSet(kinds=(<TagKind.ARTIST: 0>, <TagKind.ALBUM: 1>))
    """
    kinds: list[TagKind] = []
    tokens = csv_text.split(",") if csv_text else []
    for raw_token in tokens:
        token = raw_token.strip()
        kind = parse_tag_name(token)
        if kind is None:
            logger.warning(f"[TagParsing] Unknown tag {token!r}")
            continue
        if not tagset_contains(allowed, kind):
            logger.debug(f"[TagParsing] Disabling tag {tag_name(kind)}")
            continue
        if len(kinds) >= TAG_COUNT:
            logger.warning(f"[TagParsing] {list_name} is full ({TAG_COUNT} kinds), dropping {tag_name(kind)}")
            continue
        kinds.append(kind)

    result = TagSet(tuple(kinds))
    logger.info(f"[TagParsing] Enabled {list_name}: {' '.join(result.names())}")
    return result


def tagset_contains(tagset: TagSet, kind: TagKind) -> bool:
    """Linear membership test."""
    return any(member == kind for member in tagset.kinds)


def tagset_from_kinds(kinds: Iterable[TagKind]) -> TagSet:
    """Build a TagSet from kinds, dropping repeats (first occurrence wins)."""
    unique: list[TagKind] = []
    for kind in kinds:
        if kind not in unique:
            unique.append(TagKind(kind))
    return TagSet(tuple(unique))


def tagset_all() -> TagSet:
    """Every known kind, in enumeration order."""
    return TagSet(tuple(TagKind))
