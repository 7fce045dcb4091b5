from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .cell import column_index_to_label, is_cell_name, parse_cell
from .parser import parse_reference

_BARE_SHEET_NAME_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class A1Notation(BaseModel):
    """Rectangular range of a spreadsheet, optionally bound to a sheet.

    Columns and rows are 1-based. A missing bound means the range is open in
    that direction, so ``left``/``right`` alone describe whole columns and
    ``top``/``bottom`` alone describe whole rows.

    Direct construction validates its arguments; ranges returned by
    :meth:`parse` reflect the text as written and skip that validation.
    """

    model_config = ConfigDict(frozen=True)

    sheet_name: str | None = None
    left: int | None = Field(default=None, ge=1)
    top: int | None = Field(default=None, ge=1)
    right: int | None = Field(default=None, ge=1)
    bottom: int | None = Field(default=None, ge=1)

    @model_validator(mode="before")
    @classmethod
    def _default_far_corner(cls, data: Any) -> Any:
        """Turn a bare point into a single-cell range."""
        if not isinstance(data, dict):
            return data
        if data.get("right") is None and data.get("bottom") is None:
            return {**data, "right": data.get("left"), "bottom": data.get("top")}
        return data

    @field_validator("sheet_name")
    @classmethod
    def _validate_sheet_name(cls, value: str | None) -> str | None:
        if value is not None and value == "":
            raise ValueError("sheet_name must not be empty.")
        return value

    @model_validator(mode="after")
    def _validate_pairing(self) -> A1Notation:
        if self.right is not None and self.left is None:
            raise ValueError("right requires left.")
        if self.bottom is not None and self.top is None:
            raise ValueError("bottom requires top.")
        return self

    @classmethod
    def new(
        cls,
        sheet_name: str | None = None,
        left: int | None = None,
        top: int | None = None,
        right: int | None = None,
        bottom: int | None = None,
    ) -> A1Notation:
        """Build a validated range from positional bounds.

        Raises:
            pydantic.ValidationError: On an empty sheet name, a bound below 1,
                or ``right``/``bottom`` given without ``left``/``top``.
        """
        return cls(
            sheet_name=sheet_name, left=left, top=top, right=right, bottom=bottom
        )

    @classmethod
    def parse(cls, text: str) -> A1Notation:
        """Parse A1 notation such as ``Sheet1!A1:B2`` or ``'My Sheet'!A:A``.

        Raises:
            A1ParseError: If ``text`` is not valid A1 notation.
        """
        ref = parse_reference(text)
        left = top = right = bottom = None
        if ref.cell1 is not None:
            left, top = parse_cell(ref.cell1)
        if ref.cell2 is not None:
            right, bottom = parse_cell(ref.cell2)
        return cls.model_construct(
            sheet_name=ref.sheet_name,
            left=left,
            top=top,
            right=right,
            bottom=bottom,
        )

    @property
    def is_bounded(self) -> bool:
        """True when all four bounds are set."""
        return None not in (self.left, self.top, self.right, self.bottom)

    @property
    def is_single_cell(self) -> bool:
        return (
            self.is_bounded and self.left == self.right and self.top == self.bottom
        )

    def cell_reference(self) -> str:
        """Return the cell portion of the notation, without the sheet name."""
        cell1 = _cell_text(self.left, self.top)
        cell2 = _cell_text(self.right, self.bottom)
        if self.is_bounded:
            if self.is_single_cell:
                return cell1
            return f"{cell1}:{cell2}"
        if cell1 and cell2:
            # whole rows/columns such as 1:2 or A:A
            return f"{cell1}:{cell2}"
        return cell1 or cell2

    def format(self) -> str:
        """Render the range back to A1 notation."""
        cell = self.cell_reference()
        if self.sheet_name is None:
            return cell
        sheet = escape_sheet_name(self.sheet_name)
        if cell:
            return f"{sheet}!{cell}"
        return sheet

    def boundaries(self) -> tuple[int | None, int | None, int | None, int | None]:
        """Return ``(min_col, min_row, max_col, max_row)``; None where open.

        Same layout as ``openpyxl.utils.range_boundaries``. Bounds are returned
        as stored, without reordering.
        """
        return self.left, self.top, self.right, self.bottom

    def cell_count(self) -> int | None:
        """Return the number of cells in a bounded range, None when open."""
        if not self.is_bounded:
            return None
        assert self.left is not None and self.right is not None
        assert self.top is not None and self.bottom is not None
        cols = abs(self.right - self.left) + 1
        rows = abs(self.bottom - self.top) + 1
        return cols * rows

    def __str__(self) -> str:
        return self.format()


def _cell_text(col: int | None, row: int | None) -> str:
    text = ""
    if col is not None:
        text += column_index_to_label(col)
    if row is not None:
        text += str(row)
    return text


def escape_sheet_name(name: str) -> str:
    """Quote a sheet name when it would not re-parse as the same name.

    Cell-like names such as ``A1`` are always quoted. Other ASCII alphanumeric
    names stay bare, and the rest are quoted with embedded ``'`` doubled.
    """
    if is_cell_name(name):
        return f"'{name}'"
    if _BARE_SHEET_NAME_PATTERN.fullmatch(name):
        return name
    return "'" + name.replace("'", "''") + "'"


def parse(text: str) -> A1Notation:
    """Parse A1 notation text into an :class:`A1Notation`."""
    return A1Notation.parse(text)


def normalize(text: str) -> str:
    """Return the canonical spelling of A1 notation (e.g. ``a1:b2`` -> ``A1:B2``)."""
    return parse(text).format()
