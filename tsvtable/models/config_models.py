from __future__ import annotations

from dataclasses import dataclass

"""Config dataclasses for tsvtable.

Kept apart from the loader in tsvtable/config/loader.py so that models and the
file collaborator can depend on the settings without pulling in YAML parsing.
"""

__all__ = [
    "TableConfig",
    "DEFAULT_CONFIG",
]


@dataclass(frozen=True)
class TableConfig:
    """Settings for reading and writing TSV files.

    Only the file collaborator consults these; the in-memory model has no
    configuration.
    """
    encoding: str = "utf-8"  # text encoding for load_file / to_file
    strict: bool = False  # raise TsvIOError instead of swallowing I/O failures


DEFAULT_CONFIG = TableConfig()
