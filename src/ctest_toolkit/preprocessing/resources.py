"""
Module: preprocessing.resources

Purpose:
    Per-language registry of the collaborators a generation pass needs:
    the annotation provider, exclusion rules and gap index finders.
    Language codes are never validated; unknown codes only receive the
    language-independent rules and finders.

Key Classes:
    - CTestResourceProvider: Registry resolved once per generation

Dependencies:
    - .annotation: AnnotationProvider, SpacyAnnotationProvider
    - .rules: Built-in exclusion rules
    - .finders: Built-in gap index finders

Used By:
    - gapscheme.generator: CTestGenerator
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Set, Tuple

from .annotation import AnnotatedText, AnnotationProvider, SpacyAnnotationProvider
from .finders import GapIndexFinder, elision, leading_punctuation
from .rules import (
    ExclusionRule,
    is_elided_clitic,
    is_hyphenated,
    is_not_a_word,
    is_simple_named_entity,
    is_too_short,
)

logger = logging.getLogger(__name__)

# Registry key for rules and finders that apply to every language
LANGUAGE_INDEPENDENT = ""

# Languages that do not capitalize common nouns
_NAMED_ENTITY_LANGUAGES = ("en", "fr", "es", "it", "nl")

# Languages whose articles elide into the following word
_ELISION_LANGUAGES = ("fr", "it")


def _default_rules() -> Dict[str, List[ExclusionRule]]:
    rules: Dict[str, List[ExclusionRule]] = {
        LANGUAGE_INDEPENDENT: [is_too_short, is_not_a_word, is_hyphenated],
        "de": [],
    }
    for language in _NAMED_ENTITY_LANGUAGES:
        rules[language] = [is_simple_named_entity]
    for language in _ELISION_LANGUAGES:
        rules[language].append(is_elided_clitic)
    return rules


def _default_finders() -> Dict[str, List[GapIndexFinder]]:
    finders: Dict[str, List[GapIndexFinder]] = {LANGUAGE_INDEPENDENT: [leading_punctuation()]}
    for language in _ELISION_LANGUAGES:
        finders[language] = [elision()]
    return finders


class CTestResourceProvider:
    """
    Resolves annotation, exclusion rules and gap index finders by language.

    Each instance owns its registries, so registering a rule on one
    provider does not affect others.

    Attributes:
        annotator: Collaborator producing AnnotatedText

    Example:
        >>> resources = CTestResourceProvider()
        >>> resources.register_rule("en", lambda token: token.text == "the")
        >>> len(resources.rules_for("en"))
        5
    """

    def __init__(self, annotator: Optional[AnnotationProvider] = None) -> None:
        self.annotator: AnnotationProvider = annotator or SpacyAnnotationProvider()
        self._rules = _default_rules()
        self._finders = _default_finders()

    def annotate(self, text: str, language: str) -> AnnotatedText:
        """
        Annotate text with the configured provider.

        Raises:
            InitializationError: If the provider cannot prepare its pipeline
        """
        return self.annotator.annotate(text, language)

    def rules_for(self, language: str) -> Tuple[ExclusionRule, ...]:
        """Language-independent rules followed by the language-specific ones."""
        return self._resolve(self._rules, language)

    def finders_for(self, language: str) -> Tuple[GapIndexFinder, ...]:
        """Language-independent finders followed by the language-specific ones."""
        return self._resolve(self._finders, language)

    def register_rule(self, language: str, rule: ExclusionRule) -> None:
        self._rules.setdefault(self._key(language), []).append(rule)

    def register_finder(self, language: str, finder: GapIndexFinder) -> None:
        self._finders.setdefault(self._key(language), []).append(finder)

    def supported_languages(self) -> Set[str]:
        """Languages with specific rules or finders registered."""
        languages = set(self._rules) | set(self._finders)
        languages.discard(LANGUAGE_INDEPENDENT)
        return languages

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def _key(language: str) -> str:
        return (language or LANGUAGE_INDEPENDENT).lower()

    def _resolve(self, registry: Dict[str, list], language: str) -> tuple:
        key = self._key(language)
        resolved = list(registry.get(LANGUAGE_INDEPENDENT, []))
        if key != LANGUAGE_INDEPENDENT:
            if key not in registry:
                logger.debug(f"No specific resources for '{language}', using language-independent set")
            resolved.extend(registry.get(key, []))
        return tuple(resolved)
