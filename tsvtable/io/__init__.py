"""File and DataFrame collaborators for tsvtable documents."""

from .file_store import TsvIOError, read_text, write_text

__all__ = [
    "TsvIOError",
    "read_text",
    "write_text",
]
