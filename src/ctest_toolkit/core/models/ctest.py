"""
Module: ctest

Purpose:
    Provides the CTestObject dataclass - the in-memory C-Test document.
    Holds tokens in document order with sentence ends marked on the
    last token of each sentence.

Key Classes:
    - CTestObject: Generated C-Test document
    - ArgumentError: Malformed bulk input from a caller

Dependencies:
    - dataclasses (std)
    - .tokens.CTestToken

Used By:
    - gapscheme.generator: Populated during generation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

from .tokens import CTestToken


class ArgumentError(ValueError):
    """Caller supplied malformed input (e.g. mismatched sizes)."""
    pass


@dataclass
class CTestObject:
    """
    A C-Test document.

    Attributes:
        language: ISO 639-1 code, or "" for language-independent mode
        tokens: Tokens in document order

    Example:
        >>> ctest = CTestObject("en")
        >>> ctest.add_token(CTestToken("Hello", is_last_token_in_sentence=True))
        >>> ctest.gap_count
        0
    """

    language: str = ""
    tokens: List[CTestToken] = field(default_factory=list)

    def add_token(self, token: CTestToken) -> None:
        self.tokens.append(token)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties (NEVER stored)
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def gap_count(self) -> int:
        """Number of tokens currently gapped."""
        return sum(1 for token in self.tokens if token.is_gap)

    @property
    def candidate_count(self) -> int:
        """Number of tokens that were eligible for gapping."""
        return sum(1 for token in self.tokens if token.is_candidate)

    @property
    def gaps(self) -> List[CTestToken]:
        """Gapped tokens in document order."""
        return [token for token in self.tokens if token.is_gap]

    @property
    def sentences(self) -> List[List[CTestToken]]:
        """
        Group tokens into sentences.

        A trailing run of tokens without a sentence-end flag forms a final
        sentence of its own.

        Returns:
            List of token lists, one per sentence
        """
        return list(self._iter_sentences())

    def _iter_sentences(self) -> Iterator[List[CTestToken]]:
        current: List[CTestToken] = []
        for token in self.tokens:
            current.append(token)
            if token.is_last_token_in_sentence:
                yield current
                current = []
        if current:
            yield current

    # ─────────────────────────────────────────────────────────────────────────
    # External Results
    # ─────────────────────────────────────────────────────────────────────────

    def apply_error_rates(self, error_rates: Sequence[float]) -> CTestObject:
        """
        Assign externally computed error rates to the gaps in order.

        Args:
            error_rates: One rate per gap, in document order

        Returns:
            This CTestObject

        Raises:
            ArgumentError: If the number of rates differs from gap_count
        """
        gaps = self.gaps
        if len(error_rates) != len(gaps):
            raise ArgumentError(
                f"Gapped tokens in C-Test must match results: "
                f"results: {len(error_rates)}, gaps: {len(gaps)}"
            )
        for token, rate in zip(gaps, error_rates):
            token.error_rate = rate
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "language": self.language,
            "tokens": [token.to_dict() for token in self.tokens],
        }

    @classmethod
    def from_dict(cls, data: dict) -> CTestObject:
        return cls(
            language=data.get("language", ""),
            tokens=[CTestToken.from_dict(t) for t in data.get("tokens", [])],
        )
