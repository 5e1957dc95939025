"""Orchestrator restricted to the Level 0 subset."""

from edtf_parsing.errors import ParseErrorKind
from edtf_parsing.factory import Productions
from edtf_parsing.grammar import Failure
from edtf_parsing.model import Edtf
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator


class Level0ParseOrchestrator(ParseOrchestrator):
    """Parses only Level 0 EDTF: plain dates, date-times and closed intervals.

    Level 1 input is recognised by the same productions and then rejected as a
    structural conflict, so the error names the Level 1 feature that was used.
    """

    def get_parser_steps(self) -> list[Productions]:
        return [
            Productions.INTERVAL,
            Productions.DATE_TIME,
            Productions.LETTER_PREFIXED_YEAR,
            Productions.CALENDAR_DATE,
        ]

    def accept(self, value: Edtf) -> Failure | None:
        # Lazy import to avoid circular dependency
        from edtf_parsing.query import level1_features

        features = level1_features(value)
        if features:
            return Failure(
                ParseErrorKind.STRUCTURAL,
                0,
                f"Level 1 features are not allowed at Level 0: {', '.join(features)}",
            )
        return None
