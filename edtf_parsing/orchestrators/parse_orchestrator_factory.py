from enum import Enum

from edtf_parsing.orchestrators.level0_parse_orchestrator import Level0ParseOrchestrator
from edtf_parsing.orchestrators.level1_parse_orchestrator import Level1ParseOrchestrator
from edtf_parsing.orchestrators.parse_orchestrator import ParseOrchestrator


class ParseOrchestratorTypes(Enum):
    LEVEL_0 = 0
    LEVEL_1 = 1


class ParseOrchestratorFactory:
    """Factory for creating parse orchestrators based on conformance level."""

    @staticmethod
    def get_orchestrator(orchestrator_type: ParseOrchestratorTypes) -> ParseOrchestrator:
        """Get the parse orchestrator for the given conformance level.

        Args:
            orchestrator_type: LEVEL_0 or LEVEL_1

        Returns:
            ParseOrchestrator: An instance of the corresponding parse orchestrator.

        Raises:
            ValueError: If the orchestrator type is not recognized.
        """
        if orchestrator_type == ParseOrchestratorTypes.LEVEL_0:
            return Level0ParseOrchestrator()
        elif orchestrator_type == ParseOrchestratorTypes.LEVEL_1:
            return Level1ParseOrchestrator()
        else:
            raise ValueError(f"Unknown orchestrator type: {orchestrator_type}")
