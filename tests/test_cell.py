from __future__ import annotations

from openpyxl.utils import column_index_from_string, get_column_letter
import pytest

from a1notation import A1ParseError
from a1notation.cell import (
    MAX_COLUMN,
    column_index_to_label,
    column_label_to_index,
    is_cell_name,
    parse_cell,
    split_cell,
)


def test_column_roundtrip() -> None:
    assert column_label_to_index("A") == 1
    assert column_label_to_index("Z") == 26
    assert column_label_to_index("AA") == 27
    assert column_label_to_index("ZZZ") == MAX_COLUMN
    assert column_index_to_label(1) == "A"
    assert column_index_to_label(27) == "AA"
    assert column_index_to_label(MAX_COLUMN) == "ZZZ"


def test_column_label_is_case_insensitive() -> None:
    assert column_label_to_index("ab") == column_label_to_index("AB") == 28


def test_column_codec_matches_openpyxl() -> None:
    for index in range(1, MAX_COLUMN + 1):
        label = column_index_to_label(index)
        assert label == get_column_letter(index)
        assert label.isascii() and label.isupper()
        assert column_label_to_index(label) == index
        assert column_index_from_string(label) == index


@pytest.mark.parametrize("label", ["", "AAAA", "A1", "Ä"])
def test_column_label_rejects_invalid(label: str) -> None:
    with pytest.raises(ValueError, match="Invalid column label"):
        column_label_to_index(label)


def test_column_index_rejects_non_positive() -> None:
    with pytest.raises(ValueError, match="must be positive"):
        column_index_to_label(0)


def test_is_cell_name() -> None:
    assert is_cell_name("A1")
    assert is_cell_name("zzz99")
    assert is_cell_name("12")
    assert not is_cell_name("A")
    assert not is_cell_name("AAAA1")
    assert not is_cell_name("Sheet1")
    assert not is_cell_name("A1\n")


def test_split_cell() -> None:
    assert split_cell("b12") == ("B", 12)
    assert split_cell("B") == ("B", None)
    assert split_cell("12") == (None, 12)


def test_parse_cell() -> None:
    assert parse_cell("B12") == (2, 12)
    assert parse_cell("aa") == (27, None)
    assert parse_cell("007") == (None, 7)


@pytest.mark.parametrize("name", ["", "1A", "AAAA1", "A-1"])
def test_parse_cell_rejects_invalid(name: str) -> None:
    with pytest.raises(A1ParseError, match="invalid cell name"):
        parse_cell(name)


def test_parse_cell_rejects_row_zero() -> None:
    with pytest.raises(A1ParseError, match="invalid cell name: A0"):
        parse_cell("A0")
