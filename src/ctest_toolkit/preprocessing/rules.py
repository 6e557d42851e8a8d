"""
Module: preprocessing.rules

Purpose:
    Exclusion rules: predicates deciding that a token must never become
    a gap candidate. Rules are plain callables so new ones can be
    registered per language without subclassing.

Key Functions:
    - is_too_short(): Single-character tokens
    - is_not_a_word(): Tokens without any letters (punctuation, numbers)
    - is_hyphenated(): Hyphenated compounds
    - is_elided_clitic(): Bare elided articles (l', qu') in Romance languages
    - is_simple_named_entity(): Capitalized tokens inside a sentence

Used By:
    - preprocessing.resources: Per-language rule registry
    - gapscheme.generator: Candidate eligibility
"""

from __future__ import annotations

import re
from typing import Callable

from .annotation import AnnotatedToken

ExclusionRule = Callable[[AnnotatedToken], bool]

MIN_TOKEN_LENGTH = 2

_HYPHENATED = re.compile(r"\w-\w")
_ELIDED_CLITIC = re.compile(r"^\w{1,2}['’]$")


def is_too_short(token: AnnotatedToken) -> bool:
    """Tokens shorter than MIN_TOKEN_LENGTH cannot be split into prefix and suffix."""
    return len(token.text) < MIN_TOKEN_LENGTH


def is_not_a_word(token: AnnotatedToken) -> bool:
    return not any(ch.isalpha() for ch in token.text)


def is_hyphenated(token: AnnotatedToken) -> bool:
    return _HYPHENATED.search(token.text) is not None


def is_elided_clitic(token: AnnotatedToken) -> bool:
    """Bare elided articles split off by the tokenizer (l', d', qu')."""
    return _ELIDED_CLITIC.match(token.text) is not None


def is_simple_named_entity(token: AnnotatedToken) -> bool:
    """
    Treat capitalized words as named entities unless they start a sentence.

    Only meaningful for languages that do not capitalize common nouns.

    Args:
        token: Token to test

    Returns:
        True if the token starts with an uppercase letter, has more than
        one character and is not the first token of its sentence
    """
    text = token.text
    if len(text) < 2 or not text[0].isupper():
        return False
    return not token.is_sentence_start
