"""Command builders for tag capability negotiation.

The "tagtypes" command family selects which tags the server includes in song
responses. Servers older than 0.21.0 do not support it; every builder returns
an empty command list for them so the session can send the result blindly.
"""

from __future__ import annotations

import logging

from songtags.helpers.dto.tags_dto import TagSet

logger = logging.getLogger(__name__)

MIN_TAGTYPES_VERSION = (0, 21, 0)


def parse_server_version(text: str) -> tuple[int, int, int]:
    """
    Parse a "major.minor.patch" version string.

    Missing or non-numeric parts are 0: "0.23" -> (0, 23, 0).
    """
    parts = [int(part) if part.isdigit() else 0 for part in text.strip().split(".")[:3]]
    while len(parts) < 3:
        parts.append(0)
    return parts[0], parts[1], parts[2]


def supports_tagtypes(server_version: tuple[int, int, int]) -> bool:
    """Check if the server understands the tagtypes commands."""
    return tuple(server_version) >= MIN_TAGTYPES_VERSION


def _quote(argument: str) -> str:
    if " " in argument or '"' in argument:
        escaped = argument.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return argument


def build_disable_all_tags_command(server_version: tuple[int, int, int]) -> list[str]:
    """Commands that stop the server from reporting any tag."""
    if not supports_tagtypes(server_version):
        return []
    logger.debug("[Tagtypes] Disabling all tag types")
    return ["tagtypes clear"]


def build_enable_all_tags_command(server_version: tuple[int, int, int]) -> list[str]:
    """Commands that make the server report every tag it knows."""
    if not supports_tagtypes(server_version):
        return []
    logger.debug("[Tagtypes] Enabling all tag types")
    return ["tagtypes all"]


def build_enable_tags_commands(tagset: TagSet, server_version: tuple[int, int, int]) -> list[str]:
    """
    Command list restricting server reports to ``tagset``.

    Args:
        tagset: Kinds to enable (duplicates are sent once)
        server_version: Negotiated server version

    Returns:
        ["command_list_begin", "tagtypes clear", "tagtypes enable ...",
        "command_list_end"]; the enable line is omitted for an empty set.
    """
    if not supports_tagtypes(server_version):
        return []
    logger.debug("[Tagtypes] Setting interesting tag types")
    commands = ["command_list_begin", "tagtypes clear"]
    names = list(dict.fromkeys(tagset.names()))
    if names:
        commands.append("tagtypes enable " + " ".join(_quote(name) for name in names))
    commands.append("command_list_end")
    return commands
