from __future__ import annotations

from openpyxl.utils import range_boundaries
import pytest

from a1notation import ordered_boundaries, parse, range_cell_count, range_geometry


def test_range_cell_count() -> None:
    assert range_cell_count("A1:C3") == 9
    assert range_cell_count("C3:A1") == 9
    assert range_cell_count("Sheet1!B2") == 1


def test_range_cell_count_rejects_open_range() -> None:
    with pytest.raises(ValueError, match="not fully bounded"):
        range_cell_count("A:C")


def test_range_geometry() -> None:
    base, rows, cols = range_geometry("D6:B4")
    assert base == "B4"
    assert rows == 3
    assert cols == 3


def test_range_geometry_with_sheet() -> None:
    assert range_geometry("'My Sheet'!a1:b5") == ("A1", 5, 2)


def test_range_geometry_rejects_open_range() -> None:
    with pytest.raises(ValueError, match="not fully bounded"):
        range_geometry("Sheet1!1:2")


def test_ordered_boundaries() -> None:
    assert ordered_boundaries(parse("D6:B4")) == (2, 4, 4, 6)
    assert ordered_boundaries(parse("C:A")) == (1, None, 3, None)


@pytest.mark.parametrize("ref", ["A1:B2", "B3:AA10", "A:C", "1:5", "ZZZ1"])
def test_boundaries_match_openpyxl(ref: str) -> None:
    assert parse(ref).boundaries() == range_boundaries(ref)
