"""Domain models for tsvtable.

Cell is the value type; Row and Document are sparse, index-ordered containers
built on top of it.
"""

from .cell import Cell, is_numeric_text, normalize_decimal_comma
from .config_models import TableConfig
from .document import Document
from .row import Row

__all__ = [
    # Value model
    "Cell",
    "is_numeric_text",
    "normalize_decimal_comma",
    # Containers
    "Row",
    "Document",
    # Configuration
    "TableConfig",
]
