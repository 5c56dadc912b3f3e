"""Client-side search over rendered tag values.

Matching is an exact substring test on case-folded text. No ranking, no
fuzzy matching.
"""

from __future__ import annotations

from collections.abc import Iterable

from songtags.components.tagging.tag_render_comp import join_values
from songtags.helpers.dto.song_dto import Song
from songtags.helpers.dto.tags_dto import TagSet, TagValueStore


def normalize_search_term(text: str) -> str:
    """Prepare user input for matches(): strip surrounding whitespace and case-fold."""
    return text.strip().casefold()


def matches(store: TagValueStore, search_term: str, enabled: TagSet) -> bool:
    """
    Check whether any enabled tag contains the search term.

    Args:
        store: Tag values of the item
        search_term: Already case-folded term; "" matches every item
        enabled: Kinds to search, values joined with ", " per kind

    Returns:
        True if the term is empty or found in at least one kind
    """
    if not search_term:
        return True
    for kind in enabled:
        text, count = join_values(store, kind)
        if count and search_term in text.casefold():
            return True
    return False


def filter_songs(songs: Iterable[Song], search_term: str, enabled: TagSet) -> list[Song]:
    """Keep the songs whose tags match ``search_term`` (order preserved)."""
    return [song for song in songs if matches(song.tags, search_term, enabled)]
