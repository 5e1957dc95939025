"""Parser for calendar dates: years, months, days, seasons, masks and qualifiers."""

from edtf_parsing import calendar
from edtf_parsing.errors import ParseErrorKind
from edtf_parsing.grammar import (
    Failure,
    Match,
    ParseResult,
    YearToken,
    literal,
    masked_run,
    qualifier,
    season_code,
    signed_year_digits,
)
from edtf_parsing.model import (
    Date,
    DatePrecision,
    DayMasked,
    MonthDayMasked,
    MonthMasked,
    Year,
    YearMasked,
    YearMonth,
    YearMonthDay,
    YearSeason,
)
from edtf_parsing.strategy import EdtfProductionStrategy


class CalendarDateProduction(EdtfProductionStrategy):
    """Parses a single EDTF calendar date.

    Examples:
    - 2019, -0043, 201X, 19XX
    - 2019-07, 2019-XX, 2019-22 (summer)
    - 2019-07-09, 2019-07-XX, 2019-XX-XX
    - any of the above followed by one of ? ~ %

    Nothing is committed until every digit group has been read and, for
    concrete months and days, checked against the calendar.
    """

    def parse(self, text: str, pos: int = 0) -> ParseResult:
        """Parse a date starting at ``pos``.

        Args:
            text: The full input
            pos: Where the date starts

        Returns:
            A Match holding a Date, a Failure, or None if no year starts here
        """
        year = signed_year_digits(text, pos)
        if not isinstance(year, Match):
            return year

        cursor = year.end
        month = None
        day = None
        if literal(text, cursor, "-") is not None:
            month = masked_run(text, cursor + 1, 2)
            if isinstance(month, Failure):
                return month
            if month is not None:
                cursor = month.end
                if literal(text, cursor, "-") is not None:
                    day = masked_run(text, cursor + 1, 2)
                    if isinstance(day, Failure):
                        return day
                    if day is not None:
                        cursor = day.end

        precision = self._build_precision(year.value, month, day)
        if isinstance(precision, Failure):
            return precision

        certainty = qualifier(text, cursor)
        return Match(Date(precision, certainty.value), pos, certainty.end)

    def _build_precision(
        self, year: YearToken, month: Match | None, day: Match | None
    ) -> DatePrecision | Failure:
        """Classify the digit groups into one precision variant, validating concrete values."""
        if month is None:
            if year.field.masked:
                return YearMasked(year.base(), year.field.masked)
            return Year(year.base())

        if year.field.masked:
            return Failure(
                ParseErrorKind.STRUCTURAL,
                month.start,
                "a year with unspecified digits cannot be followed by a month or day",
            )
        for component, label in ((month, "month"), (day, "day")):
            if component is not None and component.value.masked and not component.value.is_fully_masked:
                return Failure(
                    ParseErrorKind.STRUCTURAL,
                    component.start,
                    f"a partially unspecified {label} is not supported",
                )

        y = year.base()
        month_field = month.value
        if day is None:
            if month_field.masked:
                return MonthMasked(y)
            m = month_field.value()
            if calendar.is_valid_month(m):
                return YearMonth(y, m)
            season = season_code(m)
            if season is not None:
                return YearSeason(y, season)
            return Failure(
                ParseErrorKind.OUT_OF_RANGE,
                month.start,
                f"{m:02d} is neither a month (01-12) nor a season (21-24)",
            )

        day_field = day.value
        if month_field.masked:
            if day_field.masked:
                return MonthDayMasked(y)
            return Failure(
                ParseErrorKind.STRUCTURAL,
                day.start,
                "a day cannot be specified when the month is unspecified",
            )
        m = month_field.value()
        if not calendar.is_valid_month(m):
            return Failure(
                ParseErrorKind.OUT_OF_RANGE,
                month.start,
                f"month must be 01-12 when a day follows, got {m:02d}",
            )
        if day_field.masked:
            return DayMasked(y, m)
        d = day_field.value()
        if not calendar.is_valid_day(y, m, d):
            return Failure(
                ParseErrorKind.OUT_OF_RANGE,
                day.start,
                f"day {d:02d} does not exist in month {m:02d} of year {y}",
            )
        return YearMonthDay(y, m, d)
