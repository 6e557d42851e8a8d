"""
Module: gapscheme

Purpose:
    Gap selection for C-Tests: decides which words become gaps, where
    the gap boundary falls inside each word, and how an existing C-Test
    is regapped toward a new gap count.

Key Functions:
    - estimate_gap_index(): Gap boundary for a token
    - update_gaps(): Regap a token list in place
    - load_generator_config(): Read configuration from JSON

Key Classes:
    - CTestGenerator: Main entry point
    - GeneratorConfig: Immutable generator configuration

Dependencies:
    - ctest_toolkit.core.models: CTestObject, CTestToken
    - ctest_toolkit.preprocessing: Annotation, rules and finders
"""

from .config import GeneratorConfig, load_generator_config
from .generator import (
    CTestGenerator,
    GenerationPass,
    estimate_gap_index,
    INSUFFICIENT_GAPS,
    INSUFFICIENT_SENTENCES,
    TOO_MANY_SENTENCES,
)
from .regap import default_target_gap_count, update_gaps

__all__ = [
    # Config
    "GeneratorConfig",
    "load_generator_config",
    # Generation
    "CTestGenerator",
    "GenerationPass",
    "estimate_gap_index",
    # Warnings
    "INSUFFICIENT_GAPS",
    "INSUFFICIENT_SENTENCES",
    "TOO_MANY_SENTENCES",
    # Regapping
    "default_target_gap_count",
    "update_gaps",
]
