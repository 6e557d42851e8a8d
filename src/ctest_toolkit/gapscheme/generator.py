"""
Module: gapscheme.generator

Purpose:
    Main C-Test generation algorithm. Decides token by token whether a
    word is a gap candidate, whether it is gapped given the sentence and
    count constraints, and where the gap boundary falls inside the word.

Key Functions:
    - estimate_gap_index(): Gap boundary for a single token

Key Classes:
    - CTestGenerator: Configured generator, entry point for callers
    - GenerationPass: Per-call state of one generation

Algorithm:
    1. Annotate the text and resolve rules/finders for the language
    2. Walk sentences, estimating the gap index for every token
    3. Mark candidates (sentence position + exclusion rules)
    4. Gap all but every gap_interval-th candidate until gap_limit
    5. Generate quality warnings

Dependencies:
    - ctest_toolkit.core.models: CTestObject, CTestToken
    - ctest_toolkit.preprocessing: CTestResourceProvider
    - gapscheme.config: GeneratorConfig
    - gapscheme.regap: update_gaps

Used By:
    - Callers building C-Tests from raw text
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from ctest_toolkit.core.models import CTestObject, CTestToken
from ctest_toolkit.preprocessing import (
    AnnotatedText,
    AnnotatedToken,
    CTestResourceProvider,
    ExclusionRule,
    GapIndexFinder,
)

from .config import DEFAULT_GAP_INTERVAL, DEFAULT_GAP_LIMIT, GeneratorConfig
from .regap import update_gaps

logger = logging.getLogger(__name__)

MIN_SENTENCES = 3

INSUFFICIENT_SENTENCES = (
    "INSUFFICIENT NUMBER OF SENTENCES - The supplied text did not contain enough sentences."
    " You may need to add additional sentences."
)
TOO_MANY_SENTENCES = (
    "TOO MANY SENTENCES - The supplied text contained more sentences than necessary. "
    "The c-test did not use all sentences."
)
INSUFFICIENT_GAPS = (
    "INSUFFICIENT NUMBER OF GAPS - The supplied text was too short to produce at least {gap_limit} gaps. "
    "Try to add more words."
)


def estimate_gap_index(token: AnnotatedToken, finders: Sequence[GapIndexFinder]) -> int:
    """
    Estimate where the hidden suffix of a token starts.

    Each matching finder proposes the earliest offset at which the suffix
    may start; the latest proposal wins. The rest of the word from that
    offset is then split in half (playgro___ for "playground").

    Args:
        token: Token to estimate
        finders: Gap index finders for the language

    Returns:
        Offset in [0, len(token.text)]
    """
    gap_range_start = 0
    for finder in finders:
        proposal = finder(token)
        if proposal is not None:
            gap_range_start = max(gap_range_start, proposal)

    gap_range_start = min(gap_range_start, len(token.text))
    return gap_range_start + len(token.text[gap_range_start:]) // 2


@dataclass
class GenerationPass:
    """
    Mutable state of a single generation call.

    A fresh pass is created for every call, so a configured generator
    never shares counters between generations.

    Attributes:
        annotated: Annotated input text
        language: Language code of the generated C-Test
        config: Generator configuration
        exclusion_rules: Rules resolved for the language
        gap_finders: Finders resolved for the language
    """

    annotated: AnnotatedText
    language: str
    config: GeneratorConfig
    exclusion_rules: Sequence[ExclusionRule]
    gap_finders: Sequence[GapIndexFinder]

    # Internal state
    ctest: CTestObject = field(init=False)
    warnings: List[str] = field(init=False, default_factory=list)
    gap_candidates: int = field(init=False, default=0)
    gap_count: int = field(init=False, default=0)
    sentence_count: int = field(init=False, default=0)
    sentence_limit: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        self.ctest = CTestObject(self.language)

    # ─────────────────────────────────────────────────────────────────────────
    # Full Generation
    # ─────────────────────────────────────────────────────────────────────────

    def make_gaps(self) -> CTestObject:
        """
        Gap the text under the leading/trailing sentence and gap limit rules.

        Returns:
            The populated CTestObject
        """
        sentences = self.annotated.sentences
        self.sentence_count = 0
        self.sentence_limit = len(sentences) - 1
        self.gap_count = 0
        self.gap_candidates = 0

        for s_idx, sentence in enumerate(sentences):
            for token in sentence:
                c_token = self._new_token(token)

                if self._is_valid_gap_candidate(token):
                    c_token.is_candidate = True
                    if self._is_gap():
                        c_token.is_gap = True
                        self.gap_count += 1
                        if self.gap_count == self.config.gap_limit:
                            self.sentence_limit = s_idx + 1
                            logger.debug(
                                f"Gap limit {self.config.gap_limit} reached in sentence {s_idx}"
                            )
                    self.gap_candidates += 1
                self.ctest.add_token(c_token)
            self._close_sentence()
            self.sentence_count += 1

        return self.ctest

    def _is_valid_gap_candidate(self, token: AnnotatedToken) -> bool:
        if self.config.enforce_leading_sentence and self.sentence_count == 0:
            return False
        if self.config.enforce_trailing_sentence and self.sentence_count >= self.sentence_limit:
            return False
        return not self._is_excluded(token)

    def _is_gap(self) -> bool:
        # no gaps in leading and trailing sentence
        if self.sentence_count == 0 or self.sentence_count >= self.sentence_limit:
            return False
        return (
            self.gap_candidates % self.config.gap_interval != 0
            and self.gap_count < self.config.gap_limit
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Partial Generation
    # ─────────────────────────────────────────────────────────────────────────

    def make_simple_gaps(self, gap_offset: int) -> CTestObject:
        """
        Gap every sentence without a gap limit.

        Args:
            gap_offset: Candidate index (mod gap_interval) that is gapped

        Returns:
            The populated CTestObject
        """
        self.gap_candidates = 0
        self.gap_count = 0

        for sentence in self.annotated.sentences:
            for token in sentence:
                c_token = self._new_token(token)
                if not self._is_excluded(token):
                    c_token.is_candidate = True
                    if self.gap_candidates % self.config.gap_interval == gap_offset:
                        c_token.is_gap = True
                        self.gap_count += 1
                    self.gap_candidates += 1
                self.ctest.add_token(c_token)
            self._close_sentence()
            self.sentence_count += 1

        return self.ctest

    # ─────────────────────────────────────────────────────────────────────────
    # Warnings
    # ─────────────────────────────────────────────────────────────────────────

    def generate_warnings(self) -> List[str]:
        """
        Collect quality warnings for a full generation.

        Returns:
            Warning messages in a fixed order
        """
        self.warnings = []

        if self.sentence_count < self.sentence_limit or len(self.annotated.sentences) < MIN_SENTENCES:
            self.warnings.append(INSUFFICIENT_SENTENCES)

        # Also emitted whenever the gap limit is not reached before the last sentence
        if self.sentence_count > self.sentence_limit:
            self.warnings.append(TOO_MANY_SENTENCES)

        if self.gap_count < self.config.gap_limit:
            self.warnings.append(INSUFFICIENT_GAPS.format(gap_limit=self.config.gap_limit))

        for warning in self.warnings:
            logger.warning(warning)
        return self.warnings

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _new_token(self, token: AnnotatedToken) -> CTestToken:
        return CTestToken(
            token.text,
            gap_index=estimate_gap_index(token, self.gap_finders),
        )

    def _is_excluded(self, token: AnnotatedToken) -> bool:
        return any(rule(token) for rule in self.exclusion_rules)

    def _close_sentence(self) -> None:
        if self.ctest.tokens:
            self.ctest.tokens[-1].is_last_token_in_sentence = True


class CTestGenerator:
    """
    Builds CTestObjects from raw text.

    By default a C-Test contains 20 gaps and every second candidate is
    left ungapped. The generator keeps the result of the last successful
    run for retrieval; the configuration itself is immutable and only
    replaced through the enforcement setters.

    Example:
        >>> generator = CTestGenerator(gap_limit=20, gap_interval=2)
        >>> ctest = generator.generate_ctest(text, "en")
        >>> ctest.gap_count <= generator.gap_limit
        True
    """

    def __init__(
        self,
        gap_limit: int = DEFAULT_GAP_LIMIT,
        gap_interval: int = DEFAULT_GAP_INTERVAL,
        enforce_leading_sentence: bool = True,
        enforce_trailing_sentence: bool = True,
        *,
        resources: Optional[CTestResourceProvider] = None,
    ) -> None:
        self.config = GeneratorConfig(
            gap_limit=gap_limit,
            gap_interval=gap_interval,
            enforce_leading_sentence=enforce_leading_sentence,
            enforce_trailing_sentence=enforce_trailing_sentence,
        )
        self.resources = resources or CTestResourceProvider()

        self.ctest: Optional[CTestObject] = None
        self.warnings: List[str] = []
        self.text: Optional[str] = None
        self.language: Optional[str] = None

    @classmethod
    def from_config(
        cls,
        config: GeneratorConfig,
        resources: Optional[CTestResourceProvider] = None,
    ) -> CTestGenerator:
        generator = cls(resources=resources)
        generator.config = config
        return generator

    # ─────────────────────────────────────────────────────────────────────────
    # Configuration Accessors
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def gap_limit(self) -> int:
        """Maximum number of gaps in a full generation."""
        return self.config.gap_limit

    @property
    def gap_interval(self) -> int:
        """
        Interval of gaps among candidates.

        Only candidates count towards the interval; excluded words such
        as names are skipped.
        """
        return self.config.gap_interval

    @property
    def enforces_leading_sentence(self) -> bool:
        return self.config.enforce_leading_sentence

    @enforces_leading_sentence.setter
    def enforces_leading_sentence(self, enforce: bool) -> None:
        self.config = replace(self.config, enforce_leading_sentence=enforce)

    @property
    def enforces_trailing_sentence(self) -> bool:
        return self.config.enforce_trailing_sentence

    @enforces_trailing_sentence.setter
    def enforces_trailing_sentence(self, enforce: bool) -> None:
        self.config = replace(self.config, enforce_trailing_sentence=enforce)

    @property
    def gap_count(self) -> int:
        """Number of gaps in the last generated CTestObject."""
        return self.ctest.gap_count if self.ctest is not None else 0

    # ─────────────────────────────────────────────────────────────────────────
    # Generation
    # ─────────────────────────────────────────────────────────────────────────

    def generate_ctest(self, text: str, language: str) -> CTestObject:
        """
        Generate a C-Test from text.

        The language selects the exclusion rules and gap index finders;
        unsupported languages get the language-independent ones.

        Args:
            text: Text to convert; should contain at least three sentences
            language: ISO 639-1 code

        Returns:
            The generated CTestObject (warnings in self.warnings)

        Raises:
            InitializationError: If the text cannot be annotated
        """
        logger.info(
            f"Generating C-Test for '{language}' "
            f"(limit={self.config.gap_limit}, interval={self.config.gap_interval})"
        )
        generation = self._initialise(text, language)
        ctest = generation.make_gaps()
        warnings = generation.generate_warnings()

        logger.info(
            f"Generated {ctest.gap_count} gaps from {generation.gap_candidates} candidates "
            f"in {len(generation.annotated.sentences)} sentences"
        )
        self._store(text, language, ctest, warnings)
        return ctest

    def generate_partial_ctest(self, text: str, language: str, gap_first: bool) -> CTestObject:
        """
        Generate a C-Test ignoring the sentence and gap limit constraints.

        First and last sentences are gapped too and there is no gap limit,
        so no warnings are generated.

        Args:
            text: Text to gap
            language: ISO 639-1 code
            gap_first: If True, the first candidate is gapped

        Returns:
            The generated CTestObject

        Raises:
            InitializationError: If the text cannot be annotated
        """
        gap_offset = 0 if gap_first else 1
        generation = self._initialise(text, language)
        ctest = generation.make_simple_gaps(gap_offset)

        logger.info(f"Generated partial C-Test with {ctest.gap_count} gaps for '{language}'")
        self._store(text, language, ctest, [])
        return ctest

    def update_gaps(
        self,
        tokens: List[CTestToken],
        gap_first: bool,
        target_gap_count: Optional[int] = None,
    ) -> List[CTestToken]:
        """
        Regap tokens in place with this generator's gap interval.

        See gapscheme.regap.update_gaps for the algorithm.
        """
        return update_gaps(
            tokens,
            gap_first,
            target_gap_count,
            gap_interval=self.config.gap_interval,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _initialise(self, text: str, language: str) -> GenerationPass:
        """Annotate text and resolve rules/finders into a fresh pass."""
        annotated = self.resources.annotate(text, language)
        return GenerationPass(
            annotated=annotated,
            language=language,
            config=self.config,
            exclusion_rules=self.resources.rules_for(language),
            gap_finders=self.resources.finders_for(language),
        )

    def _store(self, text: str, language: str, ctest: CTestObject, warnings: List[str]) -> None:
        self.text = text
        self.language = language
        self.ctest = ctest
        self.warnings = list(warnings)
