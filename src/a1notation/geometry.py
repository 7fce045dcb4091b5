from __future__ import annotations

from .cell import column_index_to_label
from .notation import A1Notation, parse


def range_cell_count(range_ref: str) -> int:
    """Return the number of cells represented by a bounded A1 range."""
    count = parse(range_ref).cell_count()
    if count is None:
        raise ValueError(f"Range is not fully bounded: {range_ref}")
    return count


def range_geometry(range_ref: str) -> tuple[str, int, int]:
    """Parse an A1 range and return top-left cell + (rows, cols).

    Reversed corners are accepted: ``D6:B4`` yields ``("B4", 3, 3)``.
    """
    min_col, min_row, max_col, max_row = ordered_boundaries(parse(range_ref))
    if min_col is None or min_row is None or max_col is None or max_row is None:
        raise ValueError(f"Range is not fully bounded: {range_ref}")
    return (
        f"{column_index_to_label(min_col)}{min_row}",
        max_row - min_row + 1,
        max_col - min_col + 1,
    )


def ordered_boundaries(
    notation: A1Notation,
) -> tuple[int | None, int | None, int | None, int | None]:
    """Return boundaries with each axis sorted so min <= max where both are set."""
    left, top, right, bottom = notation.boundaries()
    if left is not None and right is not None:
        left, right = min(left, right), max(left, right)
    if top is not None and bottom is not None:
        top, bottom = min(top, bottom), max(top, bottom)
    return left, top, right, bottom
