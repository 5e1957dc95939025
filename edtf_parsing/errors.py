"""Error taxonomy for EDTF parsing."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Why a parse was rejected."""
    MALFORMED = "malformed-token"        # no grammar production matches at this position
    OUT_OF_RANGE = "out-of-range"        # lexically fine, fails calendar/time validation
    STRUCTURAL = "structural-conflict"   # a shape the grammar does not permit


class EdtfParseError(ValueError):
    """Raised by the parse entry points when the input is not valid EDTF.

    Attributes:
        kind: The ParseErrorKind of the failure
        message: Human readable description
        text: The full input string
        position: Index into ``text`` where the offending substring starts
    """

    def __init__(self, kind: ParseErrorKind, message: str, text: str, position: int):
        self.kind = kind
        self.message = message
        self.text = text
        self.position = position
        super().__init__(f"{kind.value}: {message} at position {position} in {text!r}")

    @property
    def fragment(self) -> str:
        """The offending substring, from ``position`` to the end of the input."""
        return self.text[self.position:]
