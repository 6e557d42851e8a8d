"""
Module: gapscheme.regap

Purpose:
    Recompute which tokens of an existing C-Test are gapped, moving
    toward a new target gap count while reusing the candidate flags
    from the earlier generation.

Key Functions:
    - default_target_gap_count(): Half of the candidates
    - update_gaps(): Regap a token list in place

Algorithm:
    1. Clear all gaps if the target is not positive
    2. Primary pass over existing candidates, gapping every
       gap_interval-th one until the target is reached
    3. Shortfall pass: if candidates ran out, force the following tokens
       to be candidates and keep gapping with the same interval rule
    4. Ungap every token after the last gap placed

Used By:
    - gapscheme.generator: CTestGenerator.update_gaps
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ctest_toolkit.core.models import CTestToken

from .config import DEFAULT_GAP_INTERVAL

logger = logging.getLogger(__name__)


def default_target_gap_count(tokens: List[CTestToken], gap_first: bool) -> int:
    """
    Target used when no explicit gap count is requested.

    Args:
        tokens: Tokens carrying candidate flags
        gap_first: Whether the first candidate is gapped

    Returns:
        (candidates - (0 if gap_first else 1)) // 2
    """
    candidates = sum(1 for token in tokens if token.is_candidate)
    if not gap_first:
        candidates -= 1
    return candidates // 2


def update_gaps(
    tokens: List[CTestToken],
    gap_first: bool,
    target_gap_count: Optional[int] = None,
    *,
    gap_interval: int = DEFAULT_GAP_INTERVAL,
) -> List[CTestToken]:
    """
    Regap tokens in place toward a target gap count.

    Candidate restrictions are ignored once the existing candidates are
    exhausted, so the target is reached whenever enough tokens follow
    the last gap.

    Args:
        tokens: Tokens to regap (mutated in place)
        gap_first: Whether the first candidate should be gapped
        target_gap_count: Desired number of gaps (default: half the candidates)
        gap_interval: Every gap_interval-th candidate is gapped

    Returns:
        The same token list

    Invariants:
        - No token after the last gap placed is gapped
        - Calling twice with the same target yields the same gap set

    Example:
        >>> tokens = [CTestToken(w, is_candidate=True) for w in "one two three four".split()]
        >>> [t.is_gap for t in update_gaps(tokens, gap_first=True, target_gap_count=2)]
        [True, False, True, False]
    """
    if gap_interval < 1:
        raise ValueError(f"gap_interval must be positive: {gap_interval}")

    if target_gap_count is None:
        target_gap_count = default_target_gap_count(tokens, gap_first)

    if target_gap_count <= 0:
        for token in tokens:
            token.is_gap = False
        return tokens

    initial_candidates = 0 if gap_first else 1
    gap_candidates = initial_candidates
    gap_count = 0
    last_gap_index = 0

    for i, token in enumerate(tokens):
        if not token.is_candidate:
            continue
        is_gap = gap_candidates % gap_interval == 0
        token.is_gap = is_gap
        if is_gap:
            gap_count += 1
            last_gap_index = i
        gap_candidates += 1
        if gap_count == target_gap_count:
            break

    if gap_count < target_gap_count:
        logger.debug(
            f"Candidates exhausted at {gap_count}/{target_gap_count} gaps, "
            f"forcing candidates after index {last_gap_index}"
        )
        if gap_count > 0:
            start = last_gap_index + 1
            gap_candidates = 1
        else:
            # No gap placed yet: restart from the first token
            start = 0
            gap_candidates = initial_candidates

        for i in range(start, len(tokens)):
            token = tokens[i]
            token.is_candidate = True
            is_gap = gap_candidates % gap_interval == 0
            token.is_gap = is_gap
            if is_gap:
                gap_count += 1
                last_gap_index = i
            gap_candidates += 1
            if gap_count == target_gap_count:
                break

        if gap_count < target_gap_count:
            logger.debug(f"Ran out of tokens at {gap_count}/{target_gap_count} gaps")

    for token in tokens[last_gap_index + 1:]:
        token.is_gap = False

    return tokens
