"""Abstract base class for EDTF grammar productions."""

from abc import ABC, abstractmethod

from edtf_parsing.grammar import ParseResult


class EdtfProductionStrategy(ABC):
    """Interface for one production of the EDTF grammar."""

    @property
    def name(self) -> str:
        """Production name for logging."""
        return type(self).__name__

    @abstractmethod
    def parse(self, text: str, pos: int = 0) -> ParseResult:
        """Try this production at ``pos``.

        Args:
            text: The full input
            pos: Where the production starts

        Returns:
            A Match if the production committed a span, a Failure if the input
            is this production but invalid, None if it does not apply
        """
        pass
