import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import ctest_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from ctest_toolkit.core.models import CTestToken
from ctest_toolkit.preprocessing import AnnotatedText, CTestResourceProvider


class StaticAnnotationProvider:
    """Annotation provider returning pre-tokenized sentences."""

    def __init__(self, sentences: list[list[str]]):
        self.sentences = sentences
        self.calls: list[tuple[str, str]] = []

    def annotate(self, text: str, language: str) -> AnnotatedText:
        self.calls.append((text, language))
        return AnnotatedText.from_sentences(self.sentences, language)


# Common test fixtures
@pytest.fixture
def make_resources():
    """Factory for resource providers backed by pre-tokenized sentences."""
    def _make(sentences: list[list[str]]) -> CTestResourceProvider:
        return CTestResourceProvider(annotator=StaticAnnotationProvider(sentences))
    return _make


@pytest.fixture
def make_tokens():
    """Factory for CTestToken lists from a candidate pattern like "CC-C"."""
    def _make(pattern: str) -> list[CTestToken]:
        return [
            CTestToken(f"word{i}", is_candidate=(flag == "C"), gap_index=2)
            for i, flag in enumerate(pattern)
        ]
    return _make


@pytest.fixture
def three_sentences() -> list[list[str]]:
    """The Quick fox jumps over the lazy dog. It ran far. The sun set."""
    return [
        ["The", "Quick", "fox", "jumps", "over", "the", "lazy", "dog", "."],
        ["It", "ran", "far", "."],
        ["The", "sun", "set", "."],
    ]


@pytest.fixture
def long_text_sentences() -> list[list[str]]:
    """Six sentences of five plain words plus a full stop."""
    words = [
        "alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf",
        "hotel", "india", "juliet", "kilo", "lima", "mike", "november",
        "oscar", "papa", "quebec", "romeo", "sierra", "tango", "uniform",
        "victor", "whiskey", "xray", "yankee", "zulu", "anchor", "bridge",
        "castle", "desert",
    ]
    return [words[i:i + 5] + ["."] for i in range(0, 30, 5)]
