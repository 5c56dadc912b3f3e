"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer
contracts within that domain (interfaces → services → components).

Rules for DTO modules:
- Import only stdlib, typing and songtags.helpers
- Contain ONLY dataclass/type definitions and simple container behavior
- No I/O, no business logic
"""

from __future__ import annotations

from songtags.helpers.dto.config_dto import TagConfig, TagSettings
from songtags.helpers.dto.song_dto import AudioFormat, Song
from songtags.helpers.dto.tags_dto import TagSet, TagValueStore

__all__ = [
    "AudioFormat",
    "Song",
    "TagConfig",
    "TagSet",
    "TagSettings",
    "TagValueStore",
]
