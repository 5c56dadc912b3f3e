"""Safe atomic file write component.

Writes to a uniquely named temporary file in the destination's directory,
then atomically replaces the destination. If anything fails, the temp file
is removed and the destination keeps its previous content, so a partially
written file is never observable at the destination path.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class SafeWriteResult:
    """Result of a safe write operation."""

    success: bool
    error: str | None = None


def write_data_to_file(path: str | Path, data: bytes | str) -> SafeWriteResult:
    """
    Atomically write ``data`` to ``path``.

    Args:
        path: Destination file (its directory must exist)
        data: Bytes, or text encoded as UTF-8

    Returns:
        SafeWriteResult with success status
    """
    destination = Path(path)
    payload = data.encode("utf-8") if isinstance(data, str) else data

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f"{destination.name}.", dir=destination.parent)
    except OSError as e:
        logger.error(f"[SafeWrite] Can not open temp file for {destination}: {e}")
        return SafeWriteResult(success=False, error=str(e))

    temp_path = Path(tmp_name)
    try:
        # Step 1: Write and close the temp file
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        logger.debug(f"[SafeWrite] Wrote {len(payload)} bytes to {temp_path}")

        # Step 2: Atomic replacement
        os.replace(temp_path, destination)
        logger.debug(f"[SafeWrite] Replaced {destination}")
        return SafeWriteResult(success=True)

    except Exception as e:
        logger.error(f"[SafeWrite] Writing {destination} failed: {e}")
        return SafeWriteResult(success=False, error=str(e))

    finally:
        # Clean up temp file (already gone after a successful replace)
        if temp_path.exists():
            try:
                temp_path.unlink()
            except OSError as e:
                logger.error(f"[SafeWrite] Error removing temp file {temp_path}: {e}")
