"""
Cli package.
"""

from .ui import (
    COLOR_ERROR,
    COLOR_INFO,
    COLOR_SUCCESS,
    COLOR_WARNING,
    InfoPanel,
    print_error,
    print_info,
    print_json,
    print_warning,
    show_spinner,
    show_table,
)
from .utils import (
    build_services,
    read_songs,
)

__all__ = [
    "COLOR_ERROR",
    "COLOR_INFO",
    "COLOR_SUCCESS",
    "COLOR_WARNING",
    "InfoPanel",
    "build_services",
    "print_error",
    "print_info",
    "print_json",
    "print_warning",
    "read_songs",
    "show_spinner",
    "show_table",
]
