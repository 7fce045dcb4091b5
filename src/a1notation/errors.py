"""Exception hierarchy for a1notation."""

from __future__ import annotations

from pydantic import BaseModel


class A1NotationError(Exception):
    """Base exception for a1notation."""


class ParseErrorDetail(BaseModel):
    """Structured detail for a parse failure."""

    text: str
    position: int
    expected: str | None = None
    found: str | None = None
    message: str


class A1ParseError(A1NotationError, ValueError):
    """Raised when text is not valid A1 notation (also a ValueError)."""

    def __init__(self, detail: ParseErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail

    @classmethod
    def expected(
        cls, text: str, position: int, expected: str, found: str
    ) -> A1ParseError:
        """Build an error for an unmet expectation at ``position``."""
        detail = ParseErrorDetail(
            text=text,
            position=position,
            expected=expected,
            found=found,
            message=f"expected {expected}, but got {found}",
        )
        return cls(detail)

    @classmethod
    def invalid(
        cls, text: str, position: int, message: str, found: str | None = None
    ) -> A1ParseError:
        """Build an error with a free-form message."""
        detail = ParseErrorDetail(
            text=text, position=position, found=found, message=message
        )
        return cls(detail)
