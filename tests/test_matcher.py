"""Tests for the top-N ranking pipeline (get_top_n, extract, extract_one)."""

import pytest

import fuzzt
from fuzzt import Metric

CHOICES = ["trazil", "BRA ZIL", "brazil", "spain", "braziu"]


class TestGetTopN:
    """Tests for get_top_n."""

    def test_apple_example(self):
        matches = fuzzt.get_top_n(
            "apple",
            ["apply", "apples", "ape", "applet", "applesauce"],
            cutoff=0.8,
            limit=3,
        )
        assert matches == ["apples", "applet", "apply"]

    def test_defaults_keep_everything(self):
        """No cutoff and no limit: every choice comes back, best first."""
        matches = fuzzt.get_top_n("brazil", CHOICES)
        assert len(matches) == len(CHOICES)
        assert matches[0] == "brazil"

    @pytest.mark.parametrize(
        "cutoff,limit,processor,metric,expected",
        [
            (0.7, 3, None, None, ["brazil", "trazil", "braziu"]),
            (0.9, 5, None, None, ["brazil"]),
            (0.7, 2, None, fuzzt.JaroWinkler(), ["brazil", "braziu"]),
            (0.7, 2, fuzzt.LowerAlphaNumStringProcessor(), None, ["brazil", "BRA ZIL"]),
        ],
    )
    def test_brazil_cases(self, cutoff, limit, processor, metric, expected):
        matches = fuzzt.get_top_n(
            "brazil", CHOICES, cutoff=cutoff, limit=limit, processor=processor, metric=metric
        )
        assert matches == expected

    def test_equal_scores_keep_input_order(self):
        choices = ["abcx", "abcy", "abcz", "abcw"]
        assert fuzzt.get_top_n("abc", choices) == choices
        assert fuzzt.get_top_n("abc", list(reversed(choices))) == list(reversed(choices))

    def test_returns_original_not_processed_values(self):
        matches = fuzzt.get_top_n("hello", ["HELLO!", "world"], processor=str.lower, limit=1)
        assert matches == ["HELLO!"]

    def test_processor_applied_to_query(self):
        matches = fuzzt.get_top_n("HELLO", ["hello"], cutoff=1.0, processor=str.lower)
        assert matches == ["hello"]

    def test_limit_zero(self):
        assert fuzzt.get_top_n("apple", ["apple"], limit=0) == []

    def test_empty_choices(self):
        assert fuzzt.get_top_n("apple", []) == []

    def test_metric_by_name(self):
        assert fuzzt.get_top_n("martha", ["marhta", "xyz"], metric="jaro_winkler", cutoff=0.9) == [
            "marhta"
        ]
        assert fuzzt.get_top_n("martha", ["marhta", "xyz"], metric=Metric.JARO, cutoff=0.9) == [
            "marhta"
        ]
        assert fuzzt.get_top_n("a", ["a"], metric="GESTALT") == ["a"]

    def test_metric_as_callable(self):
        def length_score(a, b):
            return -abs(len(a) - len(b))

        assert fuzzt.get_top_n("abc", ["a", "abcd", "abc"], metric=length_score, cutoff=-5) == [
            "abc",
            "abcd",
            "a",
        ]

    def test_default_cutoff_drops_negative_scores(self):
        """Without a cutoff, scores below 0.0 are filtered out."""

        def length_score(a, b):
            return -abs(len(a) - len(b))

        assert fuzzt.get_top_n("abc", ["a", "abcd", "abc"], metric=length_score) == ["abc"]
        assert fuzzt.get_top_n("abc", ["a", "abc"], metric=length_score) == ["abc"]

    def test_distance_metric_ranks_larger_values_first(self):
        """Scores always sort descending, whatever the metric measures."""
        assert fuzzt.get_top_n("abc", ["abc", "xyz"], metric="levenshtein") == ["xyz", "abc"]

    def test_hamming_length_mismatch_propagates(self):
        with pytest.raises(fuzzt.LengthMismatchError):
            fuzzt.get_top_n("abc", ["abd", "ab"], metric=Metric.HAMMING)

    def test_unknown_metric(self):
        with pytest.raises(fuzzt.AlgorithmError, match="Unknown metric"):
            fuzzt.get_top_n("abc", ["abc"], metric="nope")

    def test_bad_metric_type(self):
        with pytest.raises(TypeError):
            fuzzt.get_top_n("abc", ["abc"], metric=42)

    def test_invalid_cutoff(self):
        with pytest.raises(fuzzt.ValidationError):
            fuzzt.get_top_n("abc", ["abc"], cutoff=float("nan"))
        with pytest.raises(fuzzt.ValidationError):
            fuzzt.get_top_n("abc", ["abc"], cutoff="0.5")

    def test_invalid_limit(self):
        with pytest.raises(fuzzt.ValidationError):
            fuzzt.get_top_n("abc", ["abc"], limit=-1)
        with pytest.raises(fuzzt.ValidationError):
            fuzzt.get_top_n("abc", ["abc"], limit=1.5)

    def test_invalid_workers(self):
        for workers in ("2", 0, -1, 1.5, True):
            with pytest.raises(fuzzt.ValidationError, match="workers"):
                fuzzt.get_top_n("abc", ["abc", "abd"], workers=workers)

    def test_none_inputs(self):
        with pytest.raises(TypeError):
            fuzzt.get_top_n(None, ["abc"])
        with pytest.raises(TypeError):
            fuzzt.get_top_n("abc", ["abc", None])
        with pytest.raises(TypeError):
            fuzzt.get_top_n("abc", None)

    def test_workers_preserve_order(self):
        choices = [f"item{i % 7}" for i in range(200)]
        serial = fuzzt.get_top_n("item3", choices)
        parallel = fuzzt.get_top_n("item3", choices, workers=4)
        assert parallel == serial


class TestExtract:
    """Tests for extract and extract_one."""

    def test_extract_returns_candidates(self):
        results = fuzzt.extract("apple", ["ape", "apple", "apply"], cutoff=0.5)
        assert [r.text for r in results] == ["apple", "apply", "ape"]
        assert [r.id for r in results] == [1, 2, 0]
        assert results[0].score == 1.0

    def test_extract_scores(self):
        results = fuzzt.extract("brazil", ["braziu", "spain"])
        assert [(r.text, round(r.score, 3)) for r in results] == [
            ("braziu", 0.833),
            ("spain", 0.333),
        ]

    def test_candidate_is_immutable(self):
        candidate = fuzzt.extract("a", ["a"])[0]
        with pytest.raises(AttributeError):
            candidate.score = 0.0

    def test_extract_one(self):
        best = fuzzt.extract_one("appel", ["apple", "banana"])
        assert best.text == "apple"
        assert best.id == 0
        assert fuzzt.extract_one("appel", ["banana"], cutoff=0.9) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
