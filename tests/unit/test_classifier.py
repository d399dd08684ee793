"""Unit tests for the rule-based classifier."""

import pytest

from aviator.exceptions import AviatorError, InsufficientHistoryError
from aviator.models import RULES, Category, PredictionResult, classify, get_profile


class TestRulePriority:
    """First matching rule wins."""

    def test_cooldown_beats_breakout(self):
        result = classify([1.0, 1.1, 1.15, 1.18, 6.0])
        assert result.category == Category.COOLDOWN
        assert result.reason == "LAST_ABOVE_COOLDOWN"

    def test_cooldown_on_short_history(self):
        assert classify([1.0, 5.01]).category == Category.COOLDOWN

    def test_last_value_exactly_five_is_not_cooldown(self):
        assert classify([1.0, 5.0]).category == Category.LOW

    def test_breakout_beats_stable(self):
        history = [1.0, 1.1, 1.2, 1.5, 1.9, 2.0, 2.5, 3.0]
        # <2.0 count is 5, <=1.2 count is 3, and the last three are in [2, 4]
        assert classify(history).category == Category.BREAKOUT

    def test_rules_are_ordered(self):
        assert [rule.category for rule in RULES] == [
            Category.COOLDOWN,
            Category.BREAKOUT,
            Category.STABLE,
            Category.LOW,
        ]


class TestBreakout:

    def test_example_history(self):
        result = classify([1.0, 1.1, 1.15, 1.18, 1.5])
        assert result.category == Category.BREAKOUT
        assert result.reason == "LOW_RUN_BREAKOUT"

    def test_needs_five_entries(self):
        assert classify([1.0, 1.1, 1.15, 1.18]).category == Category.LOW

    def test_needs_two_very_low_values(self):
        # five values under 2.0 but only one at or below 1.20
        assert classify([1.2, 1.3, 1.4, 1.5, 1.6]).category == Category.LOW
        assert classify([1.2, 1.2, 1.4, 1.5, 1.6]).category == Category.BREAKOUT

    def test_low_ceiling_is_strict(self):
        assert classify([1.0, 1.0, 2.0, 1.5, 1.5]).category == Category.LOW

    def test_counts_span_whole_history(self):
        # very-low values only at the start, outside any trailing window
        history = [1.0, 1.1, 1.5, 1.6, 1.7, 1.8]
        assert classify(history).category == Category.BREAKOUT


class TestStable:

    def test_example_history(self):
        result = classify([5.0, 2.5, 3.0, 3.5])
        assert result.category == Category.STABLE
        assert result.reason == "STABLE_BAND"

    def test_band_is_inclusive(self):
        assert classify([2.0, 4.0, 2.0]).category == Category.STABLE

    def test_only_last_three_matter(self):
        assert classify([9.0, 0.5, 2.1, 2.2, 2.3]).category == Category.STABLE

    def test_one_value_outside_band(self):
        assert classify([2.5, 4.01, 3.0]).category == Category.LOW
        assert classify([2.5, 3.0, 1.99]).category == Category.LOW

    def test_needs_three_entries(self):
        assert classify([2.5, 3.0]).category == Category.LOW


class TestFallback:

    def test_two_ones(self):
        result = classify([1.0, 1.0])
        assert result.category == Category.LOW
        assert result.reason == "FALLBACK_LOW"

    @pytest.mark.parametrize("history", [
        [1.0, 1.0],
        [3.0, 7.5],
        [1.03, 1.45, 1.00, 2.10, 4.56, 1.24],
        [100.0, 2.0, 2.0, 2.0, 2.0, 2.0],
        [1.0, 1.0, 1.0, 1.0, 1.0, 1.0],
    ])
    def test_never_returns_none(self, history):
        assert classify(history).category != Category.NONE


class TestContract:

    def test_idempotent(self):
        history = [1.0, 1.1, 1.15, 1.18, 1.5]
        assert classify(history) == classify(history)

    def test_input_not_mutated(self):
        history = [5.0, 2.5, 3.0, 3.5]
        classify(history)
        assert history == [5.0, 2.5, 3.0, 3.5]

    def test_accepts_tuples(self):
        assert classify((1.0, 6.0)).category == Category.COOLDOWN

    @pytest.mark.parametrize("history", [[], [3.0]])
    def test_short_history_rejected(self, history):
        with pytest.raises(InsufficientHistoryError) as excinfo:
            classify(history)
        assert excinfo.value.found == len(history)
        assert excinfo.value.required == 2
        assert isinstance(excinfo.value, AviatorError)

    def test_result_carries_profile(self):
        result = classify([5.0, 2.5, 3.0, 3.5])
        assert result.profile == get_profile(Category.STABLE)
        assert result.range_label == result.profile.range_label
        assert result.label == result.profile.label

    def test_empty_sentinel(self):
        empty = PredictionResult.empty()
        assert empty.category == Category.NONE
        assert empty.reason == "NO_PREDICTION"


class TestCascade:

    def test_fallback_rule_matches_anything(self):
        fallback = RULES[-1]
        assert fallback.category == Category.LOW
        assert fallback.predicate([9.0, 9.0])

    def test_lower_rules_skipped_after_match(self, monkeypatch):
        seen = []

        def _track(history):
            seen.append("breakout")
            return False

        patched = (RULES[0], RULES[1]._replace(predicate=_track)) + RULES[2:]
        monkeypatch.setattr("aviator.models.classifier.RULES", patched)
        assert classify([1.0, 6.0]).category == Category.COOLDOWN
        assert seen == []
        assert classify([1.0, 1.0]).category == Category.LOW
        assert seen == ["breakout"]
