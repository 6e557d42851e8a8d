"""
Module: preprocessing

Purpose:
    Collaborators consumed by the gap scheme: annotated text, exclusion
    rules and gap index finders, resolved per language.

Key Classes:
    - CTestResourceProvider: Per-language registry
    - SpacyAnnotationProvider: Default annotation provider
    - GapIndexFinder: Suffix start proposals

Dependencies:
    - spacy: Tokenization and sentence segmentation

Used By:
    - gapscheme.generator: CTestGenerator
"""

from .annotation import (
    AnnotatedSentence,
    AnnotatedText,
    AnnotatedToken,
    AnnotationProvider,
    InitializationError,
    SpacyAnnotationProvider,
)
from .finders import GapIndexFinder, elision, leading_punctuation
from .rules import (
    ExclusionRule,
    is_elided_clitic,
    is_hyphenated,
    is_not_a_word,
    is_simple_named_entity,
    is_too_short,
)
from .resources import CTestResourceProvider, LANGUAGE_INDEPENDENT

__all__ = [
    # Annotation
    "AnnotatedSentence",
    "AnnotatedText",
    "AnnotatedToken",
    "AnnotationProvider",
    "InitializationError",
    "SpacyAnnotationProvider",
    # Rules
    "ExclusionRule",
    "is_elided_clitic",
    "is_hyphenated",
    "is_not_a_word",
    "is_simple_named_entity",
    "is_too_short",
    # Finders
    "GapIndexFinder",
    "elision",
    "leading_punctuation",
    # Registry
    "CTestResourceProvider",
    "LANGUAGE_INDEPENDENT",
]
