"""
Config domain DTOs.

Data transfer objects for configuration service results.
These form cross-layer contracts between services and interfaces.

Rules:
- Import only stdlib, typing and other DTO modules
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from songtags.helpers.dto.tags_dto import TagSet


@dataclass(frozen=True)
class TagConfig:
    """User-configured tag lists, as comma-separated tag names."""

    tags: str
    search_tags: str
    browse_tags: str


@dataclass(frozen=True)
class TagSettings:
    """Resolved tag lists, validated against the server's capabilities.

    Swapped as a whole by TagsService on reconfiguration.
    """

    tags: TagSet = field(default_factory=TagSet)
    search_tags: TagSet = field(default_factory=TagSet)
    browse_tags: TagSet = field(default_factory=TagSet)
