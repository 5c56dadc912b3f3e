"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class MpdProtocolError(Exception):
    """Raised when the media server answers a command with an ACK error line."""

    def __init__(self, code: int, command: str, message: str) -> None:
        super().__init__(f"ACK [{code}] {{{command}}} {message}")
        self.code = code
        self.command = command
        self.message = message
