from __future__ import annotations

import logging
from pathlib import Path

"""File collaborator for Document.load_file / Document.to_file.

Failures are logged and swallowed by default so that a missing file leaves the
caller's document untouched. Passing ``strict=True`` raises TsvIOError instead.
"""

__all__ = [
    "TsvIOError",
    "read_text",
    "write_text",
]

logger = logging.getLogger(__name__)


class TsvIOError(Exception):
    """Raised in strict mode when a TSV file cannot be read or written."""


def read_text(path: str | Path, encoding: str = "utf-8", strict: bool = False) -> str | None:
    """Read the whole file as text.

    Returns:
        The file contents, or None when the file cannot be opened or decoded
        (non-strict mode).
    """
    p = Path(path)
    try:
        # newline="" keeps line endings exactly as stored
        with p.open("r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeError) as e:
        if strict:
            raise TsvIOError(f"cannot read {p}: {e}") from e
        logger.warning(f"read failed, document left unchanged: {p} ({e})")
        return None


def write_text(path: str | Path, text: str, encoding: str = "utf-8", strict: bool = False) -> bool:
    """Write ``text`` to ``path`` without newline translation.

    Returns:
        True on success, False when the write failed (non-strict mode).
    """
    p = Path(path)
    try:
        with p.open("w", encoding=encoding, newline="") as f:
            f.write(text)
    except (OSError, UnicodeError) as e:
        if strict:
            raise TsvIOError(f"cannot write {p}: {e}") from e
        logger.warning(f"write failed: {p} ({e})")
        return False
    return True
