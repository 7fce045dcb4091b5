from __future__ import annotations

import logging
import string

from pydantic import BaseModel

from .cell import is_cell_name
from .errors import A1ParseError
from .scanner import EOF_MARKER, Scanner

logger = logging.getLogger(__name__)

_NAME_CHARS = frozenset(string.ascii_letters + string.digits)


class ParsedReference(BaseModel):
    """Raw fragments of a reference before cell names are decoded."""

    sheet_name: str | None = None
    cell1: str | None = None
    cell2: str | None = None


class Parser:
    """Recursive-descent parser for one A1 notation string.

    Grammar::

        notation   := quoted_ref | bare_ref
        quoted_ref := "'" quoted_name "'" [ "!" cell_ref ]
        bare_ref   := name [ ( "!" cell_ref ) | ( ":" name ) ]
        cell_ref   := name [ ":" name ]
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._scanner = Scanner(text)

    def parse(self) -> ParsedReference:
        """Parse the whole input.

        Raises:
            A1ParseError: On the first grammar violation.
        """
        try:
            result = self._parse_notation()
        except A1ParseError as exc:
            logger.debug("Failed to parse %r: %s", self.text, exc.detail)
            raise
        logger.debug("Parsed %r into %s", self.text, result)
        return result

    def _parse_notation(self) -> ParsedReference:
        ch = self._scanner.peek()
        if ch == "'":
            return self._parse_quoted_ref()
        if ch in _NAME_CHARS:
            return self._parse_bare_ref()
        raise A1ParseError.invalid(
            self.text,
            self._scanner.position,
            f"unexpected character: {ch}",
            found=ch,
        )

    def _parse_quoted_ref(self) -> ParsedReference:
        sheet_name = self._parse_quoted_name()
        ch = self._scanner.peek()
        if ch == EOF_MARKER:
            # 'My Custom Sheet'
            return ParsedReference(sheet_name=sheet_name)
        if ch != "!":
            raise self._expected('"!"')
        self._scanner.advance()
        cell1, cell2 = self._parse_cell_ref()
        return ParsedReference(sheet_name=sheet_name, cell1=cell1, cell2=cell2)

    def _parse_bare_ref(self) -> ParsedReference:
        name = self._parse_name()
        ch = self._scanner.peek()
        if ch == EOF_MARKER:
            if is_cell_name(name):
                # A1
                return ParsedReference(cell1=name, cell2=name)
            # Sheet1
            return ParsedReference(sheet_name=name)
        if ch == "!":
            self._scanner.advance()
            cell1, cell2 = self._parse_cell_ref()
            return ParsedReference(sheet_name=name, cell1=cell1, cell2=cell2)
        if ch == ":":
            self._scanner.advance()
            cell2 = self._parse_name()
            self._expect_eof()
            # A1:B2
            return ParsedReference(cell1=name, cell2=cell2)
        raise self._expected('"!" or ":"')

    def _parse_cell_ref(self) -> tuple[str, str]:
        """Parse ``name [":" name]``; a lone name is a single cell."""
        cell1 = self._parse_name()
        ch = self._scanner.peek()
        if ch == EOF_MARKER:
            return cell1, cell1
        if ch != ":":
            raise self._expected('":"')
        self._scanner.advance()
        cell2 = self._parse_name()
        self._expect_eof()
        return cell1, cell2

    def _parse_quoted_name(self) -> str:
        start = self._scanner.position
        self._scanner.advance()  # opening quote
        chars: list[str] = []
        while True:
            ch = self._scanner.peek()
            if ch == EOF_MARKER:
                raise A1ParseError.invalid(
                    self.text, start, "invalid sheet name", found=EOF_MARKER
                )
            self._scanner.advance()
            if ch == "'":
                if self._scanner.peek() != "'":
                    break
                # '' is an escaped quote
                self._scanner.advance()
            chars.append(ch)
        if not chars:
            raise A1ParseError.invalid(self.text, start, "invalid sheet name")
        return "".join(chars)

    def _parse_name(self) -> str:
        start = self._scanner.position
        chars: list[str] = []
        while self._scanner.peek() in _NAME_CHARS:
            chars.append(self._scanner.peek())
            self._scanner.advance()
        if not chars:
            raise A1ParseError.invalid(
                self.text, start, "invalid cell name", found=self._scanner.peek()
            )
        return "".join(chars)

    def _expect_eof(self) -> None:
        if self._scanner.peek() != EOF_MARKER:
            raise self._expected("EOF")

    def _expected(self, expected: str) -> A1ParseError:
        return A1ParseError.expected(
            self.text, self._scanner.position, expected, self._scanner.peek()
        )


def parse_reference(text: str) -> ParsedReference:
    """Split A1 notation text into sheet name and raw cell fragments."""
    return Parser(text).parse()
