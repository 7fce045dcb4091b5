from __future__ import annotations

from typing import Final

EOF_MARKER: Final[str] = "EOF"


class Scanner:
    """Cursor over the code points of one input string.

    ``peek`` returns the current character, or ``EOF_MARKER`` once the cursor
    reached the end. The marker is never a single character.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._chars = list(text)
        self.position = 0

    def peek(self) -> str:
        """Return the character at the cursor without consuming it."""
        if self.position < len(self._chars):
            return self._chars[self.position]
        return EOF_MARKER

    def advance(self) -> None:
        """Move the cursor forward by one character.

        Raises:
            IndexError: If the cursor is already at the end of input.
        """
        if self.at_eof():
            raise IndexError("cannot advance past end of input")
        self.position += 1

    def at_eof(self) -> bool:
        return self.position >= len(self._chars)
