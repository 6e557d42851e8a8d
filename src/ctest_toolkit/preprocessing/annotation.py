"""
Module: preprocessing.annotation

Purpose:
    Annotated text model consumed by the gap scheme, and the default
    annotation provider built on spaCy's rule-based tokenizer and
    sentencizer.

Key Classes:
    - AnnotatedToken: Word token with its sentence position
    - AnnotatedSentence: Ordered tokens of one sentence
    - AnnotatedText: Ordered sentences of a text
    - AnnotationProvider: Protocol for annotation collaborators
    - SpacyAnnotationProvider: Default spaCy-backed provider
    - InitializationError: Annotation pipeline could not be prepared

Dependencies:
    - spacy: Tokenization and sentence segmentation

Used By:
    - preprocessing.resources: CTestResourceProvider
    - gapscheme.generator: Token walk during generation
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Protocol, Tuple

logger = logging.getLogger(__name__)

# Multi-language spaCy pipeline used for empty or unsupported codes
FALLBACK_LANGUAGE = "xx"


class InitializationError(Exception):
    """Annotation resources could not be prepared for a text/language."""
    pass


@dataclass(frozen=True)
class AnnotatedToken:
    """
    A word token as produced by the annotation collaborator.

    Attributes:
        text: Surface form
        begin: Character offset in the source text
        end: End offset (exclusive) in the source text
        sentence_index: 0-based index of the containing sentence
        position: 0-based index within the sentence
        pos: Coarse part-of-speech tag, if the pipeline provides one
        lemma: Base form, if the pipeline provides one
    """

    text: str
    begin: int
    end: int
    sentence_index: int = 0
    position: int = 0
    pos: Optional[str] = None
    lemma: Optional[str] = None

    @property
    def is_sentence_start(self) -> bool:
        return self.position == 0


@dataclass(frozen=True)
class AnnotatedSentence:
    """Ordered tokens of one sentence."""

    index: int
    tokens: Tuple[AnnotatedToken, ...]

    def __iter__(self) -> Iterator[AnnotatedToken]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class AnnotatedText:
    """
    Ordered sentences of an annotated text.

    Attributes:
        text: Source text
        language: Language code the text was annotated with
        sentences: Sentences in document order
    """

    text: str
    language: str
    sentences: Tuple[AnnotatedSentence, ...]

    @property
    def tokens(self) -> Tuple[AnnotatedToken, ...]:
        """All tokens in document order."""
        return tuple(token for sentence in self.sentences for token in sentence)

    @classmethod
    def from_sentences(
        cls,
        sentences: list[list[str]],
        language: str = "",
    ) -> AnnotatedText:
        """
        Build an AnnotatedText from pre-tokenized sentences.

        Tokens are assumed to be separated by single spaces in the
        source text.

        Args:
            sentences: Token strings grouped by sentence
            language: Language code

        Returns:
            AnnotatedText with offsets into the space-joined text
        """
        built = []
        offset = 0
        for s_idx, words in enumerate(sentences):
            tokens = []
            for position, word in enumerate(words):
                tokens.append(
                    AnnotatedToken(
                        text=word,
                        begin=offset,
                        end=offset + len(word),
                        sentence_index=s_idx,
                        position=position,
                    )
                )
                offset += len(word) + 1
            built.append(AnnotatedSentence(s_idx, tuple(tokens)))
        text = " ".join(word for words in sentences for word in words)
        return cls(text=text, language=language, sentences=tuple(built))


class AnnotationProvider(Protocol):
    """Collaborator that turns raw text into sentences of tokens."""

    def annotate(self, text: str, language: str) -> AnnotatedText:
        ...


class SpacyAnnotationProvider:
    """
    Annotation provider backed by blank spaCy pipelines.

    Each language gets a blank pipeline (rule-based tokenizer) with a
    sentencizer. Pipelines are built lazily and cached per language.
    Empty or unsupported language codes use the multi-language pipeline.

    Example:
        >>> provider = SpacyAnnotationProvider()
        >>> annotated = provider.annotate("Go now.", "en")
        >>> [t.text for t in annotated.tokens]
        ['Go', 'now', '.']
    """

    def __init__(self) -> None:
        self._pipelines: Dict[str, object] = {}

    def annotate(self, text: str, language: str) -> AnnotatedText:
        """
        Tokenize and sentence-split the text.

        Args:
            text: Raw text
            language: ISO 639-1 code (not validated)

        Returns:
            AnnotatedText; whitespace tokens and empty sentences are dropped

        Raises:
            InitializationError: If no spaCy pipeline can be built
        """
        nlp = self._pipeline(language)
        try:
            doc = nlp(text)
        except Exception as exc:
            raise InitializationError(f"Failed to annotate text for '{language}': {exc}") from exc

        sentences = []
        for span in doc.sents:
            words = [tok for tok in span if not tok.is_space]
            if not words:
                continue
            s_idx = len(sentences)
            tokens = tuple(
                AnnotatedToken(
                    text=tok.text,
                    begin=tok.idx,
                    end=tok.idx + len(tok.text),
                    sentence_index=s_idx,
                    position=position,
                    pos=tok.pos_ or None,
                    lemma=tok.lemma_ or None,
                )
                for position, tok in enumerate(words)
            )
            sentences.append(AnnotatedSentence(s_idx, tokens))

        logger.debug(
            f"Annotated {len(sentences)} sentences "
            f"({sum(len(s) for s in sentences)} tokens) for '{language}'"
        )
        return AnnotatedText(text=text, language=language, sentences=tuple(sentences))

    def _pipeline(self, language: str):
        """Get or build the cached pipeline for a language."""
        key = language.lower() if language else FALLBACK_LANGUAGE
        if key in self._pipelines:
            return self._pipelines[key]

        try:
            import spacy
        except ImportError as exc:
            raise InitializationError("spaCy is not installed") from exc

        try:
            nlp = spacy.blank(key)
        except ImportError:
            logger.debug(f"No spaCy language data for '{key}', using '{FALLBACK_LANGUAGE}'")
            try:
                nlp = spacy.blank(FALLBACK_LANGUAGE)
            except Exception as exc:
                raise InitializationError(
                    f"Could not create fallback pipeline for '{language}': {exc}"
                ) from exc
        except Exception as exc:
            raise InitializationError(f"Could not create pipeline for '{language}': {exc}") from exc

        nlp.add_pipe("sentencizer")
        self._pipelines[key] = nlp
        logger.info(f"Initialized annotation pipeline for '{key}'")
        return nlp
