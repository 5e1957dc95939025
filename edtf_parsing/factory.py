"""Factory for creating EDTF production strategies."""

from enum import Enum, auto

from edtf_parsing.strategy import EdtfProductionStrategy


class Productions(Enum):
    """Enumeration of available grammar productions."""
    INTERVAL = auto()
    DATE_TIME = auto()
    LETTER_PREFIXED_YEAR = auto()
    CALENDAR_DATE = auto()


class ProductionFactory:
    """Factory for creating EdtfProductionStrategy instances."""

    @staticmethod
    def get_production(production: Productions) -> EdtfProductionStrategy:
        """Get a production instance for the specified enum value.

        Args:
            production: The production to create

        Returns:
            An instance of the requested production

        Raises:
            ValueError: If the production is unknown
        """
        # Import here to avoid circular dependencies
        from edtf_parsing.interval_parser import IntervalProduction
        from edtf_parsing.datetime_parser import DateTimeProduction
        from edtf_parsing.yyear_parser import LetterPrefixedYearProduction
        from edtf_parsing.date_parser import CalendarDateProduction

        if production == Productions.INTERVAL:
            return IntervalProduction()
        elif production == Productions.DATE_TIME:
            return DateTimeProduction()
        elif production == Productions.LETTER_PREFIXED_YEAR:
            return LetterPrefixedYearProduction()
        elif production == Productions.CALENDAR_DATE:
            return CalendarDateProduction()
        else:
            raise ValueError(f"Unknown production: {production}")
