"""
Module: gapscheme.config

Purpose:
    Configuration dataclass for the gap scheme.
    Immutable configuration with validation on construction, plus
    loading from a JSON file with graceful fallback to defaults.

Key Classes:
    - GeneratorConfig: Gap limit, gap interval and sentence enforcement

Key Functions:
    - load_generator_config(): Read configuration from JSON

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - gapscheme.generator: CTestGenerator
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

DEFAULT_GAP_LIMIT = 20
DEFAULT_GAP_INTERVAL = 2


@dataclass(frozen=True)
class GeneratorConfig:
    """
    Configuration for C-Test generation (immutable).

    Attributes:
        gap_limit: Maximum number of gaps in a full generation; a limit
            of zero or below produces no gaps
        gap_interval: Every gap_interval-th candidate is left ungapped in a
            full generation; regapping gaps every gap_interval-th candidate
        enforce_leading_sentence: Keep the first sentence free of candidates
        enforce_trailing_sentence: Keep the last sentence free of candidates

    Invariants:
        - gap_interval >= 1

    Example:
        >>> config = GeneratorConfig(gap_limit=25)
        >>> config.gap_interval
        2
    """

    gap_limit: int = DEFAULT_GAP_LIMIT
    gap_interval: int = DEFAULT_GAP_INTERVAL
    enforce_leading_sentence: bool = True
    enforce_trailing_sentence: bool = True

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.gap_interval < 1:
            raise ValueError(f"gap_interval must be positive: {self.gap_interval}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GeneratorConfig:
        """
        Create config from a dictionary, ignoring unknown keys.

        Raises:
            ValueError: If a value violates the config invariants
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown config keys: {sorted(unknown)}")
        return cls(**{k: v for k, v in data.items() if k in known})


def load_generator_config(path: Union[str, Path]) -> GeneratorConfig:
    """
    Load generator configuration from a JSON file.

    A missing file yields the defaults. A malformed file is logged and
    also yields the defaults.

    Args:
        path: Path to a JSON object with GeneratorConfig fields

    Returns:
        GeneratorConfig
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No generator config at {path}, using defaults")
        return GeneratorConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        logger.warning(f"Generator config {path} is corrupted, using defaults: {e}")
        return GeneratorConfig()

    if not isinstance(data, dict):
        logger.warning(f"Generator config {path} must contain a JSON object, using defaults")
        return GeneratorConfig()

    try:
        return GeneratorConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning(f"Invalid generator config in {path}, using defaults: {e}")
        return GeneratorConfig()
