"""Parser for letter-prefixed years like 'Y170000002'."""

from edtf_parsing.errors import ParseErrorKind
from edtf_parsing.grammar import Failure, Match, ParseResult, letter_prefixed_year
from edtf_parsing.model import YYear
from edtf_parsing.strategy import EdtfProductionStrategy


class LetterPrefixedYearProduction(EdtfProductionStrategy):
    """Parses years beyond four digits.

    Matches:
    - Y17000
    - Y-170000002

    Only the bare form is accepted: no month, day, qualifier or mask may follow.
    """

    def parse(self, text: str, pos: int = 0) -> ParseResult:
        result = letter_prefixed_year(text, pos)
        if not isinstance(result, Match):
            return result
        if result.end != len(text):
            return Failure(
                ParseErrorKind.STRUCTURAL,
                result.end,
                "letter-prefixed years cannot carry a suffix",
            )
        return Match(YYear(result.value), result.start, result.end)
