from __future__ import annotations

import re
from typing import Final

from .errors import A1ParseError

MAX_COLUMN_LETTERS: Final[int] = 3
MAX_COLUMN: Final[int] = 18278

CELL_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^([A-Za-z]{{0,{MAX_COLUMN_LETTERS}}})([0-9]+)$"
)
_CELL_FRAGMENT_PATTERN = re.compile(rf"^([A-Za-z]{{0,{MAX_COLUMN_LETTERS}}})([0-9]*)$")
_COLUMN_LABEL_PATTERN = re.compile(rf"^[A-Za-z]{{1,{MAX_COLUMN_LETTERS}}}$")


def is_cell_name(name: str) -> bool:
    """Return True when ``name`` reads as a cell reference such as ``B12``."""
    return CELL_PATTERN.fullmatch(name) is not None


def column_label_to_index(label: str) -> int:
    """Convert spreadsheet column label (A/AA, any case) to 1-based index."""
    if not _COLUMN_LABEL_PATTERN.fullmatch(label):
        raise ValueError(f"Invalid column label: {label}")
    index = 0
    for char in label.upper():
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def column_index_to_label(index: int) -> str:
    """Convert 1-based column index to spreadsheet column label."""
    if index < 1:
        raise ValueError("Column index must be positive.")
    chunks: list[str] = []
    current = index
    while current > 0:
        current -= 1
        chunks.append(chr(ord("A") + (current % 26)))
        current //= 26
    return "".join(reversed(chunks))


def split_cell(name: str) -> tuple[str | None, int | None]:
    """Split a cell fragment into normalized (column_label, row).

    Either part may be None: ``"B"`` is a whole column, ``"12"`` a whole row.
    """
    match = _CELL_FRAGMENT_PATTERN.fullmatch(name)
    if match is None or not name:
        raise A1ParseError.invalid(name, 0, f"invalid cell name: {name}")
    letters, digits = match.groups()
    column = letters.upper() if letters else None
    row = int(digits) if digits else None
    if row == 0:
        raise A1ParseError.invalid(name, len(letters), f"invalid cell name: {name}")
    return column, row


def parse_cell(name: str) -> tuple[int | None, int | None]:
    """Decode a cell fragment into 1-based (column, row) numbers."""
    column, row = split_cell(name)
    col = column_label_to_index(column) if column is not None else None
    return col, row
