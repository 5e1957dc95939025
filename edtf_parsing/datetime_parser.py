"""Parser for date-times like '2019-07-15T01:56:00+04:30'."""

from edtf_parsing.date_parser import CalendarDateProduction
from edtf_parsing.errors import ParseErrorKind
from edtf_parsing.grammar import Failure, Match, ParseResult, time_of_day, tz_designator
from edtf_parsing.model import Certainty, DateComplete, DateTime, Time, TzOffset, YearMonthDay
from edtf_parsing.strategy import EdtfProductionStrategy


class DateTimeProduction(EdtfProductionStrategy):
    """Parses a complete date, ``T``, a time of day and an optional offset.

    Matches:
    - 1985-04-12T23:20:30
    - 1985-04-12T23:20:30Z
    - 1985-04-12T23:20:30-04
    - 1985-04-12T23:20:30+04:30

    The date must be a plain four-digit ``YYYY-MM-DD``: masks, seasons,
    qualifiers and negative years are structural conflicts here.
    """

    def __init__(self):
        self.date_production = CalendarDateProduction()

    def parse(self, text: str, pos: int = 0) -> ParseResult:
        t_index = text.find("T", pos)
        if t_index == -1:
            return None

        date = self.date_production.parse(text, pos)
        if date is None:
            return None
        if isinstance(date, Failure):
            return date
        if date.end != t_index:
            return Failure(
                ParseErrorKind.MALFORMED,
                date.end,
                f"unexpected text {text[date.end:t_index]!r} before 'T'",
            )

        complete = date.value.precision
        if (
            not isinstance(complete, YearMonthDay)
            or date.value.certainty != Certainty.CERTAIN
            or complete.year < 0
        ):
            return Failure(
                ParseErrorKind.STRUCTURAL,
                pos,
                "a date-time needs a complete, unqualified YYYY-MM-DD date",
            )

        clock = time_of_day(text, t_index + 1)
        if clock is None:
            return Failure(ParseErrorKind.MALFORMED, t_index + 1, "expected HH:MM:SS after 'T'")
        hour, minute, second = clock.value
        failure = self._check_time(hour, minute, second, clock.start)
        if failure is not None:
            return failure

        tz = None
        end = clock.end
        designator = tz_designator(text, clock.end)
        if designator is not None:
            tz = self._build_offset(designator)
            if isinstance(tz, Failure):
                return tz
            end = designator.end

        value = DateTime(
            DateComplete(complete.year, complete.month, complete.day),
            Time(hour, minute, second, tz),
        )
        return Match(value, pos, end)

    @staticmethod
    def _check_time(hour: int, minute: int, second: int, position: int) -> Failure | None:
        if hour > 23:
            return Failure(ParseErrorKind.OUT_OF_RANGE, position, f"hour must be 00-23, got {hour:02d}")
        if minute > 59:
            return Failure(ParseErrorKind.OUT_OF_RANGE, position + 3, f"minute must be 00-59, got {minute:02d}")
        if second > 60:
            return Failure(ParseErrorKind.OUT_OF_RANGE, position + 6, f"second must be 00-60, got {second:02d}")
        if second == 60 and (hour, minute) != (23, 59):
            return Failure(ParseErrorKind.OUT_OF_RANGE, position + 6, "a leap second is only valid at 23:59:60")
        return None

    @staticmethod
    def _build_offset(designator: Match) -> TzOffset | Failure:
        if designator.value == ("Z",):
            return TzOffset.z()
        positive, hours, minutes = designator.value
        if hours > 23:
            return Failure(
                ParseErrorKind.OUT_OF_RANGE,
                designator.start + 1,
                f"offset hours must be 00-23, got {hours:02d}",
            )
        if minutes is not None and minutes > 59:
            return Failure(
                ParseErrorKind.OUT_OF_RANGE,
                designator.start + 4,
                f"offset minutes must be 00-59, got {minutes:02d}",
            )
        return TzOffset(positive=positive, hours=hours, minutes=minutes)
