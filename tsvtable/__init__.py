r"""tsvtable: load, edit and write tab-separated tables.

    >>> from tsvtable import Document
    >>> doc = Document.from_string("Name\tAge\nMario\t25")
    >>> doc["Mario"][1].get_number()
    25
"""

from .config.loader import ConfigError, load_config
from .io.file_store import TsvIOError
from .io.frames import document_to_frame, frame_to_document
from .models import Cell, Document, Row, TableConfig, is_numeric_text, normalize_decimal_comma

__all__ = [
    "Cell",
    "Row",
    "Document",
    "is_numeric_text",
    "normalize_decimal_comma",
    "TableConfig",
    "ConfigError",
    "load_config",
    "TsvIOError",
    "document_to_frame",
    "frame_to_document",
]

__version__ = "1.0.0"
