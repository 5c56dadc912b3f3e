"""
Tags command: show the resolved tag lists.
"""

from __future__ import annotations

import argparse

from songtags.helpers.logging_helper import sanitize_exception_message
from songtags.interfaces.cli.ui import InfoPanel, print_error
from songtags.interfaces.cli.utils import build_services


def cmd_tags(args: argparse.Namespace) -> int:
    """Print the enabled, search and browse tag lists after validation."""
    try:
        _, tags_service = build_services(args)
        settings = tags_service.settings

        def _line(label: str, names: list[str]) -> str:
            return f"[bold]{label}:[/bold] {' '.join(names) if names else '-'}"

        content = "\n".join(
            [
                _line("Tags", settings.tags.names()),
                _line("Search tags", settings.search_tags.names()),
                _line("Browse tags", settings.browse_tags.names()),
            ]
        )
        InfoPanel.show("Enabled Tags", content)
        return 0
    except Exception as e:
        print_error(sanitize_exception_message(e, "Failed to resolve tags"))
        return 1
