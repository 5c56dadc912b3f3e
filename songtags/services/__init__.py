"""
Services package.
"""

from .config_service import ConfigService
from .tags_service import TagsService

__all__ = ["ConfigService", "TagsService"]
