"""Configuration loading for EdtfParser."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_DEFAULT_LEVEL = 1
_DEFAULT_REQUIRE_CHRONOLOGICAL = False
_SUPPORTED_LEVELS = (0, 1)


@dataclass(frozen=True)
class ParserConfig:
    level: int = _DEFAULT_LEVEL
    require_chronological_intervals: bool = _DEFAULT_REQUIRE_CHRONOLOGICAL

    def __post_init__(self) -> None:
        if self.level not in _SUPPORTED_LEVELS:
            raise ValueError(f"EDTF level must be 0 or 1, got {self.level}")


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("true", "1", "yes")


def load_parser_config() -> ParserConfig:
    """Load parser configuration from environment variables."""
    config = ParserConfig(
        level=_parse_int(os.getenv("EDTF_LEVEL"), _DEFAULT_LEVEL),
        require_chronological_intervals=_parse_bool(
            os.getenv("EDTF_REQUIRE_CHRONOLOGICAL"),
            _DEFAULT_REQUIRE_CHRONOLOGICAL,
        ),
    )
    logger.debug(
        f"EDTF parser config: level={config.level}, "
        f"require_chronological_intervals={config.require_chronological_intervals}"
    )
    return config
