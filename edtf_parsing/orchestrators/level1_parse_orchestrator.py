"""Orchestrator for the full Level 1 grammar."""

from edtf_parsing.factory import Productions
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator


class Level1ParseOrchestrator(ParseOrchestrator):
    """Parses Level 0 and Level 1 EDTF."""

    def get_parser_steps(self) -> list[Productions]:
        """Get the ordered list of productions for Level 1.

        A '/' anywhere makes the input an interval. Without one, a date-time is
        tried before a plain date, and a 'Y' prefix can only be a letter-prefixed
        year.

        Returns:
            Ordered list of Productions to try in sequence
        """
        return [
            Productions.INTERVAL,
            Productions.DATE_TIME,
            Productions.LETTER_PREFIXED_YEAR,
            Productions.CALENDAR_DATE,
        ]
