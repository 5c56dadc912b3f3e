"""JSON encoding primitives shared by the renderers.

Strings are emitted as UTF-8 text (no \\u escapes for non-ASCII), with the
escaping rules of the json module.
"""

from __future__ import annotations

import json


def json_string(value: str) -> str:
    """Encode ``value`` as a quoted JSON string."""
    return json.dumps(value, ensure_ascii=False)


def json_string_plain(value: str) -> str:
    """Encode ``value`` as JSON string content, without the surrounding quotes."""
    return json_string(value)[1:-1]


def json_field(key: str, encoded_value: str) -> str:
    """Build a ``"key":value`` member from an already encoded value."""
    return f"{json_string(key)}:{encoded_value}"
