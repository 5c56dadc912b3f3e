"""Tag DTOs - the per-item value store and ordered sets of tag kinds.

This module defines:
- TagValueStore: per-item mapping tag kind -> ordered unique values
- TagSet: ordered, bounded tuple of enabled tag kinds

Usage:
    from songtags.helpers.dto.tags_dto import TagSet, TagValueStore

    store = TagValueStore()
    store.add_value_dedup(TagKind.ARTIST, "Miles Davis")  # True
    store.add_value_dedup(TagKind.ARTIST, "Miles Davis")  # False, duplicate

    enabled = TagSet((TagKind.TITLE, TagKind.ARTIST))
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from songtags.helpers.tag_kinds import TAG_COUNT, TagKind, is_valid_kind, parse_tag_name, tag_name


class TagValueStore:
    """Per-item container: tag kind -> values in first-seen order.

    Invariant: no two values of the same kind are equal (exact comparison,
    no case or whitespace normalization). A kind with zero values is the
    same as an absent kind.

    The store is append-only. It is filled once during ingestion and only
    read afterwards; re-ingesting an item builds a new store.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: dict[TagKind, list[str]] = {}

    def add_value_dedup(self, kind: TagKind | int, value: str) -> bool:
        """
        Append a value unless it is already recorded for this kind.

        Args:
            kind: Tag kind (ints outside the enumeration are rejected)
            value: Non-empty text value

        Returns:
            True if a new distinct value was appended, False if the kind is
            invalid, the value is empty or a duplicate, or memory ran out.
        """
        if not is_valid_kind(kind):
            return False
        if not isinstance(value, str) or not value:
            return False
        try:
            values = self._values.setdefault(TagKind(kind), [])
            # Linear scan, per-kind cardinality is small
            if value in values:
                return False
            values.append(value)
        except MemoryError:
            return False
        return True

    def has_any(self, kind: TagKind | int) -> bool:
        """Check if at least one value is recorded for ``kind``."""
        return self.count(kind) > 0

    def count(self, kind: TagKind | int) -> int:
        """Number of values recorded for ``kind`` (0 for invalid kinds)."""
        if not is_valid_kind(kind):
            return 0
        return len(self._values.get(TagKind(kind), ()))

    def values(self, kind: TagKind | int) -> tuple[str, ...]:
        """Values of ``kind`` in insertion order (empty tuple if absent)."""
        if not is_valid_kind(kind):
            return ()
        return tuple(self._values.get(TagKind(kind), ()))

    def value(self, kind: TagKind | int, index: int = 0) -> str | None:
        """Value at ``index`` for ``kind``, or None past the end."""
        if not is_valid_kind(kind) or index < 0:
            return None
        values = self._values.get(TagKind(kind), [])
        return values[index] if index < len(values) else None

    def kinds(self) -> Iterator[TagKind]:
        """Iterate kinds that hold at least one value, in enumeration order."""
        return iter(sorted(kind for kind, values in self._values.items() if values))

    def __len__(self) -> int:
        """Return number of kinds with at least one value."""
        return sum(1 for values in self._values.values() if values)

    def __repr__(self) -> str:
        return f"TagValueStore({self.to_dict()!r})"

    @classmethod
    def from_dict(cls, data: Mapping[Any, Any]) -> TagValueStore:
        """Create a store from ``{name-or-kind: value-or-list}``.

        Names are resolved case-insensitively; unknown names are skipped.
        Scalars are wrapped so every entry is handled as a list.
        """
        store = cls()
        for key, raw in data.items():
            kind = parse_tag_name(key) if isinstance(key, str) else key
            if kind is None:
                continue
            items = raw if isinstance(raw, list | tuple) else [raw]
            for item in items:
                store.add_value_dedup(kind, item)
        return store

    def to_dict(self) -> dict[str, list[str]]:
        """Convert to ``{protocol-name: [values]}`` for kinds with values."""
        return {tag_name(kind): list(self._values[kind]) for kind in self.kinds()}


@dataclass(frozen=True)
class TagSet:
    """Ordered collection of enabled tag kinds.

    Built once at configuration time and never mutated; a reconfiguration
    builds a new TagSet. Duplicates are tolerated (membership tests are
    unaffected, only iteration cost grows).
    """

    kinds: tuple[TagKind, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if len(self.kinds) > TAG_COUNT:
            raise ValueError(f"TagSet holds at most {TAG_COUNT} kinds, got {len(self.kinds)}")
        object.__setattr__(self, "kinds", tuple(TagKind(kind) for kind in self.kinds))

    def __len__(self) -> int:
        return len(self.kinds)

    def __iter__(self) -> Iterator[TagKind]:
        return iter(self.kinds)

    def __contains__(self, kind: object) -> bool:
        return kind in self.kinds

    def names(self) -> list[str]:
        """Protocol names in set order."""
        return [tag_name(kind) for kind in self.kinds]
