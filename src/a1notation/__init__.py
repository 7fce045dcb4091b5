"""Parse and format spreadsheet A1 notation."""

from __future__ import annotations

from .cell import (
    MAX_COLUMN,
    MAX_COLUMN_LETTERS,
    column_index_to_label,
    column_label_to_index,
    is_cell_name,
    split_cell,
)
from .errors import A1NotationError, A1ParseError, ParseErrorDetail
from .geometry import ordered_boundaries, range_cell_count, range_geometry
from .notation import A1Notation, escape_sheet_name, normalize, parse
from .parser import ParsedReference, parse_reference

__all__ = [
    "A1Notation",
    "A1NotationError",
    "A1ParseError",
    "MAX_COLUMN",
    "MAX_COLUMN_LETTERS",
    "ParseErrorDetail",
    "ParsedReference",
    "column_index_to_label",
    "column_label_to_index",
    "escape_sheet_name",
    "is_cell_name",
    "normalize",
    "ordered_boundaries",
    "parse",
    "parse_reference",
    "range_cell_count",
    "range_geometry",
    "split_cell",
]
