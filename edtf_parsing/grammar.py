"""Lexical productions shared by the EDTF parsers.

Every production takes the full input and a start position. It returns

* ``None`` when it does not match (nothing is consumed, siblings may be tried),
* a ``Match`` holding the value and the end of the committed span, or
* a ``Failure`` when the input is recognisably this production but wrong,
  which stops the parse.

No production raises; the entry points in ``edtf_parser`` turn a ``Failure``
into an ``EdtfParseError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from edtf_parsing.errors import EdtfParseError, ParseErrorKind
from edtf_parsing.model import Certainty, Season

_DIGITS = frozenset("0123456789")
_MASK = "X"


@dataclass(frozen=True)
class Match:
    """A committed span ``text[start:end]`` and the value it produced."""
    value: Any
    start: int
    end: int


@dataclass(frozen=True)
class Failure:
    """A hard failure at ``position``."""
    kind: ParseErrorKind
    position: int
    message: str

    def shifted(self, offset: int) -> Failure:
        """The same failure with its position moved by ``offset`` (for sub-strings)."""
        return Failure(self.kind, self.position + offset, self.message)

    def to_error(self, text: str) -> EdtfParseError:
        return EdtfParseError(self.kind, self.message, text, self.position)


ParseResult = Union[Match, Failure, None]


@dataclass(frozen=True)
class MaskedField:
    """A fixed-width field whose rightmost ``masked`` characters are ``X``.

    ``digits`` is the specified prefix as written (possibly empty).
    """
    digits: str
    masked: int

    @property
    def width(self) -> int:
        return len(self.digits) + self.masked

    @property
    def is_fully_masked(self) -> bool:
        return not self.digits

    def value(self) -> int | None:
        """The numeric value of a field with no mask, else None."""
        if self.masked:
            return None
        return int(self.digits)


@dataclass(frozen=True)
class YearToken:
    """A four-character, possibly signed, possibly masked year."""
    negative: bool
    field: MaskedField

    def base(self) -> int:
        """The year with masked digits read as zero, sign applied."""
        digits = self.field.digits + "0" * self.field.masked
        value = int(digits)
        return -value if self.negative else value


def literal(text: str, pos: int, token: str) -> Match | None:
    if text.startswith(token, pos):
        return Match(token, pos, pos + len(token))
    return None


def take_digits(text: str, pos: int, n: int) -> Match | None:
    """Exactly ``n`` ASCII digits, returned as a string."""
    chunk = text[pos:pos + n]
    if len(chunk) == n and all(c in _DIGITS for c in chunk):
        return Match(chunk, pos, pos + n)
    return None


def two_digits(text: str, pos: int) -> Match | None:
    m = take_digits(text, pos, 2)
    if m is None:
        return None
    return Match(int(m.value), m.start, m.end)


def masked_run(text: str, pos: int, width: int) -> ParseResult:
    """A ``width``-character field of digits followed by a contiguous run of ``X``.

    ``2019``, ``201X``, ``20XX``, ``XXXX`` for years; ``07``, ``0X``, ``XX`` for
    months and days. A field made of digits and ``X`` in any other order
    (``2X1X``, ``X7``) is a Failure.
    """
    chunk = text[pos:pos + width]
    if len(chunk) != width or any(c not in _DIGITS and c != _MASK for c in chunk):
        return None
    digits = chunk.rstrip(_MASK)
    if _MASK in digits:
        return Failure(
            ParseErrorKind.MALFORMED,
            pos,
            f"unspecified digits must be the rightmost digits of a field, got {chunk!r}",
        )
    return Match(MaskedField(digits, width - len(digits)), pos, pos + width)


def signed_year_digits(text: str, pos: int) -> ParseResult:
    """Optional ``-`` then exactly four digits, some rightmost of which may be ``X``.

    A year with nothing but zeros specified cannot be negative (``-0000``,
    ``-0XXX``), since it would render without its sign.
    """
    negative = text.startswith("-", pos)
    start = pos + 1 if negative else pos
    run = masked_run(text, start, 4)
    if not isinstance(run, Match):
        return run
    if start + 4 < len(text) and (text[start + 4] in _DIGITS or text[start + 4] == _MASK):
        # More than four digits is either a YYear without its Y, or garbage
        return Failure(
            ParseErrorKind.MALFORMED,
            pos,
            "years outside four digits must be written with a 'Y' prefix",
        )
    token = YearToken(negative, run.value)
    if negative and token.field.digits.strip("0") == "":
        return Failure(ParseErrorKind.MALFORMED, pos, "year zero cannot be negative")
    return Match(token, pos, run.end)


def letter_prefixed_year(text: str, pos: int) -> ParseResult:
    """``Y`` followed by a signed run of at least five digits (no leading zero)."""
    if not text.startswith("Y", pos):
        return None
    cursor = pos + 1
    negative = text.startswith("-", cursor)
    if negative:
        cursor += 1
    end = cursor
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    digits = text[cursor:end]
    if not digits:
        return Failure(ParseErrorKind.MALFORMED, cursor, "expected digits after 'Y'")
    if digits.startswith("0"):
        return Failure(ParseErrorKind.MALFORMED, cursor, "letter-prefixed years cannot start with 0")
    if len(digits) < 5:
        return Failure(
            ParseErrorKind.OUT_OF_RANGE,
            pos,
            f"letter-prefixed years need more than four digits, got {len(digits)}",
        )
    value = int(digits)
    return Match(-value if negative else value, pos, end)


def season_code(value: int) -> Season | None:
    """``21``-``24`` in the month position; anything else is not a season."""
    try:
        return Season(value)
    except ValueError:
        return None


def qualifier(text: str, pos: int) -> Match:
    """Zero or one of ``?``, ``~``, ``%``. Always matches, possibly with an empty span."""
    if pos < len(text):
        for certainty in (Certainty.UNCERTAIN, Certainty.APPROXIMATE, Certainty.APPROXIMATE_UNCERTAIN):
            if text[pos] == certainty.value:
                return Match(certainty, pos, pos + 1)
    return Match(Certainty.CERTAIN, pos, pos)


def time_of_day(text: str, pos: int) -> Match | None:
    """``HH:MM:SS`` as an unvalidated ``(hour, minute, second)`` tuple."""
    hh = two_digits(text, pos)
    if hh is None or literal(text, hh.end, ":") is None:
        return None
    mm = two_digits(text, hh.end + 1)
    if mm is None or literal(text, mm.end, ":") is None:
        return None
    ss = two_digits(text, mm.end + 1)
    if ss is None:
        return None
    return Match((hh.value, mm.value, ss.value), pos, ss.end)


def tz_designator(text: str, pos: int) -> Match | None:
    """``Z``, ``±HH:MM`` or ``±HH`` as an unvalidated tuple.

    The value is ``("Z",)`` or ``(positive, hours, minutes_or_None)``.
    """
    if literal(text, pos, "Z") is not None:
        return Match(("Z",), pos, pos + 1)
    if pos >= len(text) or text[pos] not in "+-":
        return None
    positive = text[pos] == "+"
    hh = two_digits(text, pos + 1)
    if hh is None:
        return None
    if literal(text, hh.end, ":") is not None:
        mm = two_digits(text, hh.end + 1)
        if mm is None:
            return None
        return Match((positive, hh.value, mm.value), pos, mm.end)
    return Match((positive, hh.value, None), pos, hh.end)
