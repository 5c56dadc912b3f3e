#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and env vars
#  - Caches composed config for performance
#  - Provides reload() for runtime changes and save() for persistence
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from typing import Any

import yaml

from songtags.components.infrastructure.safe_write_comp import SafeWriteResult, write_data_to_file
from songtags.helpers.dto.config_dto import TagConfig

# Keys that may be set from YAML, env or overrides
USER_CONFIG_KEYS = {
    "music_directory",
    "tags",
    "search_tags",
    "browse_tags",
    "log_level",
}

ENV_PREFIX = "SONGTAGS_"
ENV_CONFIG_PATH = "SONGTAGS_CONFIG"


class ConfigService:
    """
    Service for loading and caching application configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, config_path: str | None = None) -> None:
        """Initialize ConfigService with empty cache.

        Args:
            config_path: Extra YAML file merged after the standard locations
        """
        self._config: dict[str, Any] | None = None
        self._config_path = config_path
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("tags")
            'Artist,Album,AlbumArtist,Title,Track,Genre,Date,Disc'
        """
        cfg = self.get_config()
        node: Any = cfg
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("[ConfigService] Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """Compose a fresh config with ``overrides`` applied (not cached)."""
        return self._compose(overrides)

    def save(self, path: str, values: dict[str, Any]) -> SafeWriteResult:
        """
        Persist user-configurable values as YAML.

        Unknown keys are dropped. The file is replaced atomically so readers
        never see a half-written config.

        Args:
            path: Destination YAML file
            values: Config values to store

        Returns:
            SafeWriteResult from the atomic writer
        """
        filtered = {k: v for k, v in values.items() if k in USER_CONFIG_KEYS}
        dropped = sorted(set(values) - set(filtered))
        if dropped:
            self._logger.warning(f"[ConfigService] Not saving unknown keys: {dropped}")

        result = write_data_to_file(path, yaml.safe_dump(filtered, sort_keys=True, allow_unicode=True))
        if result.success:
            self._logger.info(f"[ConfigService] Saved {len(filtered)} keys to {path}")
            self._config = None
        return result

    def make_tag_config(self) -> TagConfig:
        """
        Build a TagConfig from the current configuration.

        This is the boundary where the raw tag list strings leave the
        config dict; validation against server capabilities happens in
        TagsService.
        """
        cfg = self.get_config()
        return TagConfig(
            tags=self._tag_list_text(cfg.get("tags")),
            search_tags=self._tag_list_text(cfg.get("search_tags")),
            browse_tags=self._tag_list_text(cfg.get("browse_tags")),
        )

    def _tag_list_text(self, value: Any) -> str:
        """
        Normalize a tag list setting to comma-separated text.

        YAML sequences (``tags: [Artist, Album]``) are joined with ",";
        null becomes "".
        """
        if value is None:
            return ""
        if isinstance(value, list | tuple):
            return ",".join(str(item) for item in value if item is not None)
        return str(value)

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/songtags/config.yaml  (if present)
          3) ./config/config.yaml
          4) $SONGTAGS_CONFIG and the constructor's config_path (if set)
          5) overrides dict passed in
          6) Environment variables (SONGTAGS_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml("/etc/songtags/config.yaml"))
        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv(ENV_CONFIG_PATH)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))
        if self._config_path:
            self._deep_merge(cfg, self._load_yaml(self._config_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """Base defaults for user-configurable settings."""
        return {
            "music_directory": "/music",
            "tags": "Artist,Album,AlbumArtist,Title,Track,Genre,Date,Disc",
            "search_tags": "Artist,Album,AlbumArtist,Title,Genre",
            "browse_tags": "Artist,Album,AlbumArtist,Genre",
            "log_level": "INFO",
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"[ConfigService] Ignoring unreadable config {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"[ConfigService] Ignoring config {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for the user-configurable keys only.

        Supported formats:
          SONGTAGS_MUSIC_DIRECTORY=/srv/music
          SONGTAGS_TAGS=Artist,Album,Title
          SONGTAGS_SEARCH_TAGS=Artist,Title
          SONGTAGS_BROWSE_TAGS=Artist,Genre
          SONGTAGS_LOG_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == ENV_CONFIG_PATH:
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in USER_CONFIG_KEYS:
                self._logger.debug(f"Ignoring environment override for unknown key: {key}")
                continue

            if v.lower() in ("true", "false"):
                val: Any = v.lower() == "true"
            elif v.isdigit():
                val = int(v)
            else:
                val = v

            cfg[key] = val
