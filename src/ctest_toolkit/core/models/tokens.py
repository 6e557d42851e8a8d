"""
Module: tokens

Purpose:
    Provides the CTestToken dataclass - one word-level unit of a C-Test,
    carrying its surface text and its gap metadata.

Key Classes:
    - CTestToken: Token with gap flag, candidate flag and gap boundary

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.ctest.CTestObject
    - gapscheme.generator: Token creation during generation
    - gapscheme.regap: In-place regapping
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class CTestToken:
    """
    A single word of a C-Test and its gap metadata.

    The text is fixed once the token is created. The gap flags and the
    gap index are mutable so that regapping can update a token in place.

    Attributes:
        text: Surface form of the word
        is_gap: Whether the token is currently a gap
        is_candidate: Whether the token was eligible to become a gap
        gap_index: Offset where the visible prefix ends and the hidden suffix begins
        prompt: Optional hint shown to the test-taker
        error_rate: Fraction of wrong answers, set by external scoring
        other_solutions: Accepted answers besides the literal suffix
        gap_type: Free-form classification of the gap
        is_last_token_in_sentence: Marks sentence ends inside a CTestObject

    Invariants:
        - 0 <= gap_index <= len(text)
        - is_gap implies is_candidate
        - text cannot be reassigned

    Example:
        >>> token = CTestToken("playground", gap_index=5)
        >>> token.prefix, token.solution
        ('playg', 'round')
    """

    text: str
    is_gap: bool = False
    is_candidate: bool = False
    gap_index: int = 0
    prompt: str = ""
    error_rate: float = 0.0
    other_solutions: List[str] = field(default_factory=list)
    gap_type: str = ""
    is_last_token_in_sentence: bool = False

    def __post_init__(self) -> None:
        """Validate token on construction."""
        if self.is_gap and not self.is_candidate:
            raise ValueError(f"Gap token must be a candidate: {self.text!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "text" and "text" in self.__dict__:
            raise AttributeError("CTestToken.text is immutable")
        if name == "gap_index" and not 0 <= value <= len(self.text):
            raise ValueError(
                f"gap_index {value} out of range for {self.text!r} (0..{len(self.text)})"
            )
        if name == "is_gap" and value and self.__dict__.get("is_candidate") is False:
            raise ValueError(f"Cannot gap a non-candidate token: {self.text!r}")
        if (
            name == "is_candidate"
            and not value
            and "is_candidate" in self.__dict__
            and self.__dict__.get("is_gap")
        ):
            raise ValueError(f"Cannot withdraw candidacy from a gapped token: {self.text!r}")
        super().__setattr__(name, value)

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def prefix(self) -> str:
        """Visible part of the word (before the gap index)."""
        return self.text[:self.gap_index]

    @property
    def solution(self) -> str:
        """Hidden part of the word (from the gap index onwards)."""
        return self.text[self.gap_index:]

    @property
    def has_other_solutions(self) -> bool:
        return bool(self.other_solutions)

    @property
    def all_solutions(self) -> List[str]:
        """
        All accepted answers for this gap.

        Returns:
            The literal suffix followed by any alternative solutions
        """
        return [self.solution, *self.other_solutions]

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize to a plain dictionary."""
        return {
            "text": self.text,
            "is_gap": self.is_gap,
            "is_candidate": self.is_candidate,
            "gap_index": self.gap_index,
            "prompt": self.prompt,
            "error_rate": self.error_rate,
            "other_solutions": list(self.other_solutions),
            "gap_type": self.gap_type,
            "is_last_token_in_sentence": self.is_last_token_in_sentence,
        }

    @classmethod
    def from_dict(cls, data: dict) -> CTestToken:
        """
        Deserialize from a dictionary produced by to_dict().

        Args:
            data: Dictionary with at least a "text" key

        Returns:
            New CTestToken

        Raises:
            ValueError: If the data violates token invariants
        """
        return cls(
            text=data["text"],
            is_gap=data.get("is_gap", False),
            is_candidate=data.get("is_candidate", False),
            gap_index=data.get("gap_index", 0),
            prompt=data.get("prompt", ""),
            error_rate=data.get("error_rate", 0.0),
            other_solutions=list(data.get("other_solutions", [])),
            gap_type=data.get("gap_type", ""),
            is_last_token_in_sentence=data.get("is_last_token_in_sentence", False),
        )
