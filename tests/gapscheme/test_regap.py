"""
Unit tests for regapping an existing C-Test.

Tokens are built from candidate patterns: "C" marks a candidate, "-" a
token that is not.
"""

import logging

import pytest

from ctest_toolkit.gapscheme import CTestGenerator, default_target_gap_count, update_gaps


def gap_indices(tokens) -> set[int]:
    return {i for i, t in enumerate(tokens) if t.is_gap}


class TestDefaultTargetGapCount:
    """Tests for default_target_gap_count."""

    @pytest.mark.parametrize(
        "pattern, gap_first, expected",
        [
            ("CCCCCC", True, 3),
            ("CCCCCC", False, 2),
            ("CCCCC", True, 2),
            ("CCCCC", False, 2),
            ("C-C--", True, 1),
            ("-----", True, 0),
        ],
    )
    def test_default_target_when_candidates_then_half(self, make_tokens, pattern, gap_first, expected):
        assert default_target_gap_count(make_tokens(pattern), gap_first) == expected


class TestUpdateGaps:
    """Tests for update_gaps."""

    def test_update_when_default_target_and_gap_first_then_even_candidates(self, make_tokens):
        tokens = make_tokens("CCCCCC")

        update_gaps(tokens, gap_first=True)

        assert gap_indices(tokens) == {0, 2, 4}

    def test_update_when_default_target_and_not_gap_first_then_odd_candidates(self, make_tokens):
        tokens = make_tokens("CCCCCC")

        update_gaps(tokens, gap_first=False)

        assert gap_indices(tokens) == {1, 3}

    def test_update_when_candidates_scattered_then_only_candidates_counted(self, make_tokens):
        tokens = make_tokens("C-C-C-C")

        update_gaps(tokens, gap_first=True, target_gap_count=2)

        assert gap_indices(tokens) == {0, 4}

    def test_update_when_candidates_exhausted_then_following_tokens_forced(self, make_tokens):
        """Shortfall continues after the last gap with the same interval."""
        # Arrange
        tokens = make_tokens("C-------")

        # Act
        update_gaps(tokens, gap_first=True, target_gap_count=3)

        # Assert
        assert gap_indices(tokens) == {0, 2, 4}
        assert [t.is_candidate for t in tokens] == [True] * 5 + [False] * 3

    def test_update_when_no_candidates_then_restart_from_first_token(self, make_tokens):
        tokens = make_tokens("--------")

        update_gaps(tokens, gap_first=False, target_gap_count=2)

        assert gap_indices(tokens) == {1, 3}

    def test_update_when_no_gap_from_candidates_then_restart_from_first_token(self, make_tokens):
        """A candidate that was not gapped does not anchor the shortfall."""
        tokens = make_tokens("---C----")

        update_gaps(tokens, gap_first=False, target_gap_count=2)

        assert gap_indices(tokens) == {1, 3}

    def test_update_when_tokens_run_out_then_fewer_gaps(self, make_tokens):
        tokens = make_tokens("C--")

        update_gaps(tokens, gap_first=True, target_gap_count=5)

        assert gap_indices(tokens) == {0, 2}

    @pytest.mark.parametrize("target", [0, -3])
    def test_update_when_target_not_positive_then_all_gaps_cleared(self, make_tokens, target):
        tokens = make_tokens("CCCC")
        update_gaps(tokens, gap_first=True, target_gap_count=2)

        update_gaps(tokens, gap_first=True, target_gap_count=target)

        assert gap_indices(tokens) == set()

    def test_update_when_previously_gapped_then_gaps_after_last_cleared(self, make_tokens):
        # Arrange
        tokens = make_tokens("CCCCCC")
        for token in tokens:
            token.is_gap = True

        # Act
        update_gaps(tokens, gap_first=True, target_gap_count=1)

        # Assert
        assert gap_indices(tokens) == {0}

    def test_update_when_called_then_same_list_returned(self, make_tokens):
        tokens = make_tokens("CCCC")
        assert update_gaps(tokens, gap_first=True) is tokens

    def test_update_when_invalid_interval_then_raises_error(self, make_tokens):
        with pytest.raises(ValueError, match="gap_interval must be positive"):
            update_gaps(make_tokens("CCCC"), gap_first=True, gap_interval=0)

    def test_update_when_shortfall_then_logged(self, make_tokens, caplog):
        with caplog.at_level(logging.DEBUG, logger="ctest_toolkit.gapscheme.regap"):
            update_gaps(make_tokens("C-------"), gap_first=True, target_gap_count=3)

        assert "Candidates exhausted" in caplog.text

    @pytest.mark.parametrize(
        "pattern",
        ["CCCCCCCCCC", "C-C-C-C-C-", "C---------", "----------", "---C------", "CC--CC--CC"],
    )
    @pytest.mark.parametrize("target", [1, 2, 3, 4])
    @pytest.mark.parametrize("gap_first", [True, False])
    def test_update_when_applied_twice_then_same_gaps(self, make_tokens, pattern, target, gap_first):
        tokens = make_tokens(pattern)

        update_gaps(tokens, gap_first, target)
        first = gap_indices(tokens)
        update_gaps(tokens, gap_first, target)

        assert gap_indices(tokens) == first

    @pytest.mark.parametrize("pattern", ["C-----------", "CC----------", "------------", "C-C---------"])
    @pytest.mark.parametrize("target", [1, 2, 3, 4, 5])
    @pytest.mark.parametrize("gap_first", [True, False])
    def test_update_when_enough_tokens_then_exact_gap_count(self, make_tokens, pattern, target, gap_first):
        tokens = make_tokens(pattern)

        update_gaps(tokens, gap_first, target)

        assert len(gap_indices(tokens)) == target
        assert all(t.is_candidate for t in tokens if t.is_gap)


class TestGeneratorUpdateGaps:
    """Tests for CTestGenerator.update_gaps."""

    def test_update_when_generator_interval_three_then_every_third(self, make_tokens):
        tokens = make_tokens("CCCCCC")

        CTestGenerator(gap_interval=3).update_gaps(tokens, True, 2)

        assert gap_indices(tokens) == {0, 3}

    def test_update_when_generated_ctest_then_regapped_with_new_target(
        self, make_resources, long_text_sentences
    ):
        # Arrange
        generator = CTestGenerator(resources=make_resources(long_text_sentences))
        ctest = generator.generate_ctest("ignored", "en")

        # Act
        generator.update_gaps(ctest.tokens, gap_first=True, target_gap_count=4)

        # Assert
        assert [t.text for t in ctest.gaps] == ["foxtrot", "hotel", "juliet", "lima"]
        assert ctest.gap_count == 4
