"""Parse and render entry points."""

from __future__ import annotations

from edtf_parsing.config import ParserConfig
from edtf_parsing.errors import EdtfParseError, ParseErrorKind
from edtf_parsing.formatter import render
from edtf_parsing.model import Date, Edtf
from edtf_parsing.orchestrators.parse_orchestrator_factory import (
    ParseOrchestratorFactory,
    ParseOrchestratorTypes,
)
from edtf_parsing.sorting import validate_interval_order


class EdtfParser:
    """Parses EDTF text under a ParserConfig.

    The config picks the conformance level and whether closed intervals must
    run forwards in time. Instances hold no state between calls.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.orchestrator = ParseOrchestratorFactory.get_orchestrator(
            ParseOrchestratorTypes(self.config.level)
        )

    def parse(self, text: str) -> Edtf:
        """Parse a whole EDTF expression.

        Args:
            text: The EDTF string, with no surrounding whitespace

        Returns:
            A Date, DateTime, YYear, Interval, IntervalFrom or IntervalTo

        Raises:
            EdtfParseError: If the text is not valid EDTF at the configured level
        """
        value = self.orchestrator.parse(text)
        if self.config.require_chronological_intervals:
            validate_interval_order(value)
        return value

    def parse_date(self, text: str) -> Date:
        """Parse text that must be a single calendar date."""
        value = self.parse(text)
        if not isinstance(value, Date):
            raise EdtfParseError(
                ParseErrorKind.STRUCTURAL,
                f"expected a single date, got {type(value).__name__}",
                text,
                0,
            )
        return value


_LEVEL1 = EdtfParser()
_LEVEL0 = EdtfParser(ParserConfig(level=0))


def parse(text: str) -> Edtf:
    """Parse Level 0 or Level 1 EDTF text. See EdtfParser.parse."""
    return _LEVEL1.parse(text)


def parse_date(text: str) -> Date:
    return _LEVEL1.parse_date(text)


def parse_level0(text: str) -> Edtf:
    """Parse text that may only use Level 0 features."""
    return _LEVEL0.parse(text)


__all__ = ["EdtfParser", "parse", "parse_date", "parse_level0", "render"]
