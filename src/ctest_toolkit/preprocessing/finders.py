"""
Module: preprocessing.finders

Purpose:
    Gap index finders: per-language suggestions for the earliest
    character offset at which the hidden suffix of a word may start.

Key Classes:
    - GapIndexFinder: Predicate + proposal pair

Key Functions:
    - leading_punctuation(): Skip quotes/brackets glued to the word
    - elision(): Skip elided articles (l', d', qu') in Romance languages

Used By:
    - preprocessing.resources: Per-language finder registry
    - gapscheme.generator: estimate_gap_index()
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from .annotation import AnnotatedToken

# Elided article glued to the word it precedes (l'homme, qu'il)
_ELISION = re.compile(r"^\w{1,2}['’](?=[^\W\d_])")


@dataclass(frozen=True)
class GapIndexFinder:
    """
    Proposes a minimum start offset for the hidden suffix of a token.

    Attributes:
        name: Identifier used in logs
        matches: Predicate deciding whether the finder applies
        propose: Offset proposal for matching tokens

    Example:
        >>> finder = elision()
        >>> finder(AnnotatedToken("l'homme", 0, 7))
        2
    """

    name: str
    matches: Callable[[AnnotatedToken], bool]
    propose: Callable[[AnnotatedToken], int]

    def __call__(self, token: AnnotatedToken) -> Optional[int]:
        """Return the proposed offset, or None if the finder does not apply."""
        if not self.matches(token):
            return None
        return self.propose(token)


def _leading_non_letters(token: AnnotatedToken) -> int:
    for i, ch in enumerate(token.text):
        if ch.isalpha():
            return i
    return len(token.text)


def leading_punctuation() -> GapIndexFinder:
    return GapIndexFinder(
        name="leading_punctuation",
        matches=lambda token: bool(token.text) and not token.text[0].isalpha(),
        propose=_leading_non_letters,
    )


def elision() -> GapIndexFinder:
    return GapIndexFinder(
        name="elision",
        matches=lambda token: _ELISION.match(token.text) is not None,
        propose=lambda token: _ELISION.match(token.text).end(),
    )
