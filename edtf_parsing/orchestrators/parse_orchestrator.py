"""Base class for parsers that orchestrate multiple grammar productions."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from edtf_parsing.errors import EdtfParseError, ParseErrorKind
from edtf_parsing.factory import ProductionFactory, Productions
from edtf_parsing.grammar import Failure
from edtf_parsing.model import Edtf

logger = logging.getLogger(__name__)


class ParseOrchestrator(ABC):
    """Base class for parsers that try multiple productions in order.

    Subclasses define the order and selection of productions to try. The first
    production that matches the whole input wins; a production that fails hard
    ends the parse immediately.
    """

    @abstractmethod
    def get_parser_steps(self) -> list[Productions]:
        """Return the ordered list of productions to try.

        Returns:
            List of Productions enum values in the order they should be attempted.
        """
        pass

    def accept(self, value: Edtf) -> Failure | None:
        """Hook for subclasses to reject a successfully parsed value."""
        return None

    def parse(self, text: str) -> Edtf:
        """Parse ``text`` as a whole EDTF expression.

        Args:
            text: The EDTF string, with no surrounding whitespace

        Returns:
            The parsed value

        Raises:
            EdtfParseError: If no production accepts the whole input
        """
        if not isinstance(text, str):
            raise TypeError(f"EDTF input must be str, got {type(text).__name__}")

        outcome = self._parse(text)
        if isinstance(outcome, Edtf):
            return outcome
        error = outcome.to_error(text)
        logger.debug(f"Rejected EDTF {text!r}: {error.kind.value} at {error.position}: {error.message}")
        raise error

    def _parse(self, text: str) -> Edtf | Failure:
        if not text:
            return Failure(ParseErrorKind.MALFORMED, 0, "empty input")

        furthest = None
        for step in self.get_parser_steps():
            production = ProductionFactory.get_production(step)
            result = production.parse(text, 0)
            if result is None:
                continue
            if isinstance(result, Failure):
                return result
            if result.end != len(text):
                trailing = Failure(
                    ParseErrorKind.MALFORMED,
                    result.end,
                    f"unexpected trailing text {text[result.end:]!r}",
                )
                if furthest is None or trailing.position > furthest.position:
                    furthest = trailing
                continue
            rejection = self.accept(result.value)
            if rejection is not None:
                return rejection
            logger.debug(f"Parsed {text!r} with {production.name}")
            return result.value

        if furthest is not None:
            return furthest
        return Failure(ParseErrorKind.MALFORMED, 0, "not an EDTF date, date-time or interval")
