"""Parser for intervals: closed, open-ended and unknown-ended."""

from edtf_parsing.date_parser import CalendarDateProduction
from edtf_parsing.errors import ParseErrorKind
from edtf_parsing.grammar import Failure, Match, ParseResult
from edtf_parsing.model import Fixed, Interval, IntervalFrom, IntervalTo, Terminal
from edtf_parsing.strategy import EdtfProductionStrategy


class IntervalProduction(EdtfProductionStrategy):
    """Parses ``side/side`` where each side is a date, ``..`` or empty.

    Matches:
    - 2019-01/2020-01  -> Interval
    - 2019-01/..       -> IntervalFrom with an open end
    - 2019-01/         -> IntervalFrom with an unknown end
    - ../2019-01       -> IntervalTo with an open start
    - /2019-01         -> IntervalTo with an unknown start

    At least one side must be a date, and only one ``/`` is allowed.
    """

    def __init__(self):
        self.date_production = CalendarDateProduction()

    def parse(self, text: str, pos: int = 0) -> ParseResult:
        slash = text.find("/", pos)
        if slash == -1:
            return None
        second_slash = text.find("/", slash + 1)
        if second_slash != -1:
            return Failure(ParseErrorKind.STRUCTURAL, second_slash, "an interval has exactly one '/'")

        start = self.parse_side(text, pos, slash)
        if isinstance(start, Failure):
            return start
        end = self.parse_side(text, slash + 1, len(text))
        if isinstance(end, Failure):
            return end

        if isinstance(start, Fixed) and isinstance(end, Fixed):
            value = Interval(start.date, end.date)
        elif isinstance(start, Fixed):
            value = IntervalFrom(start.date, end)
        elif isinstance(end, Fixed):
            value = IntervalTo(start, end.date)
        else:
            return Failure(
                ParseErrorKind.STRUCTURAL,
                pos,
                "at least one end of an interval must be a date",
            )
        return Match(value, pos, len(text))

    def parse_side(self, text: str, start: int, stop: int) -> Fixed | Terminal | Failure:
        """Classify ``text[start:stop]`` as an unknown terminal, an open terminal or a date."""
        side = text[start:stop]
        if side == Terminal.UNKNOWN.value:
            return Terminal.UNKNOWN
        if side == Terminal.OPEN.value:
            return Terminal.OPEN

        result = self.date_production.parse(side)
        if result is None:
            return Failure(ParseErrorKind.MALFORMED, start, f"expected a date, '..' or nothing, got {side!r}")
        if isinstance(result, Failure):
            return result.shifted(start)
        if result.end != len(side):
            return Failure(
                ParseErrorKind.MALFORMED,
                start + result.end,
                f"unexpected text {side[result.end:]!r} in interval",
            )
        return Fixed(result.value)
