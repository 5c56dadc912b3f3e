"""
CLI command implementations.
"""

from .export import cmd_export
from .search import cmd_search
from .show import cmd_show
from .tags import cmd_tags

__all__ = ["cmd_export", "cmd_search", "cmd_show", "cmd_tags"]
