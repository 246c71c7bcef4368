"""Tests for Jaro and Jaro-Winkler similarity algorithms.

This module tests the Jaro and Jaro-Winkler similarity functions provided by fuzzt,
including prefix weight validation and the generic-sequence variants.
"""

import pytest

import fuzzt


class TestJaro:
    """Tests for Jaro similarity."""

    def test_jaro_empty(self):
        assert fuzzt.jaro("", "") == 1.0
        assert fuzzt.jaro("", "jaro") == 0.0
        assert fuzzt.jaro("distance", "") == 0.0

    def test_jaro_identical(self):
        assert fuzzt.jaro("jaro", "jaro") == 1.0
        assert fuzzt.jaro("a", "a") == 1.0

    def test_jaro_different(self):
        assert fuzzt.jaro("a", "b") == 0.0
        assert fuzzt.jaro("abc", "xyz") == 0.0

    def test_jaro_multibyte(self):
        assert fuzzt.jaro("testabctest", "testöঙ香test") == pytest.approx(0.818, abs=0.001)
        assert fuzzt.jaro("testöঙ香test", "testabctest") == pytest.approx(0.818, abs=0.001)

    def test_jaro_short(self):
        assert fuzzt.jaro("dixon", "dicksonx") == pytest.approx(0.767, abs=0.001)
        assert fuzzt.jaro("a", "ab") == pytest.approx(0.83, abs=0.01)
        assert fuzzt.jaro("ab", "a") == pytest.approx(0.83, abs=0.01)

    def test_jaro_no_transposition(self):
        assert fuzzt.jaro("dwayne", "duane") == pytest.approx(0.822, abs=0.001)

    def test_jaro_with_transposition(self):
        # Classic MARTHA/MARHTA example
        assert fuzzt.jaro("martha", "marhta") == pytest.approx(0.944, abs=0.001)
        assert fuzzt.jaro("a jke", "jane a k") == pytest.approx(0.6, abs=0.001)

    def test_jaro_names(self):
        assert fuzzt.jaro("Friedrich Nietzsche", "Jean-Paul Sartre") == pytest.approx(
            0.392, abs=0.001
        )

    def test_generic_jaro(self):
        assert fuzzt.generic_jaro([1, 2], [3, 4]) == 0.0
        assert fuzzt.generic_jaro([1, 2, 3], [1, 2, 3]) == 1.0
        assert fuzzt.generic_jaro(list("martha"), list("marhta")) == fuzzt.jaro("martha", "marhta")

    def test_jaro_long_strings(self):
        """"aaa..." and "bbb..." have no matching characters."""
        assert fuzzt.jaro("a" * 1000, "b" * 1000) == 0.0


class TestJaroWinkler:
    """Tests for Jaro-Winkler similarity."""

    def test_empty(self):
        assert fuzzt.jaro_winkler("", "") == 1.0
        assert fuzzt.jaro_winkler("", "jaro-winkler") == 0.0
        assert fuzzt.jaro_winkler("distance", "") == 0.0

    def test_identical(self):
        assert fuzzt.jaro_winkler("Jaro-Winkler", "Jaro-Winkler") == 1.0
        assert fuzzt.jaro_winkler("a", "a") == 1.0

    def test_different(self):
        assert fuzzt.jaro_winkler("a", "b") == 0.0

    def test_prefix_boost(self):
        jaro = fuzzt.jaro("martha", "marhta")
        jaro_winkler = fuzzt.jaro_winkler("martha", "marhta")
        assert jaro_winkler > jaro
        assert jaro_winkler == pytest.approx(0.961, abs=0.001)

    def test_reference_values(self):
        assert fuzzt.jaro_winkler("testabctest", "testöঙ香test") == pytest.approx(0.89, abs=0.001)
        assert fuzzt.jaro_winkler("dixon", "dicksonx") == pytest.approx(0.813, abs=0.001)
        assert fuzzt.jaro_winkler("dicksonx", "dixon") == pytest.approx(0.813, abs=0.001)
        assert fuzzt.jaro_winkler("dwayne", "duane") == pytest.approx(0.84, abs=0.001)
        assert fuzzt.jaro_winkler("Thorkel", "Thorgier") == pytest.approx(0.868, abs=0.001)
        assert fuzzt.jaro_winkler("Dinsdale", "D") == pytest.approx(0.738, abs=0.001)

    def test_long_prefix(self):
        # jaro is 7/9; a four element prefix adds 0.4 of the remainder
        assert fuzzt.jaro_winkler("cheeseburger", "cheese fries") == pytest.approx(0.8667, abs=0.001)
        assert fuzzt.jaro_winkler(
            "thequickbrownfoxjumpedoverx", "thequickbrownfoxjumpedovery"
        ) == pytest.approx(0.98519, abs=1e-5)

    def test_no_boost_below_threshold(self):
        """The prefix bonus is only applied when Jaro exceeds 0.7."""
        a, b = "a jke", "jane a k"
        assert fuzzt.jaro(a, b) <= 0.7
        assert fuzzt.jaro_winkler(a, b) == fuzzt.jaro(a, b)
        assert fuzzt.jaro_winkler("Friedrich Nietzsche", "Fran-Paul Sartre") == pytest.approx(
            0.452, abs=0.001
        )

    def test_generic(self):
        assert fuzzt.generic_jaro_winkler([1, 2, 3, 4], [1, 2, 3, 4]) == 1.0
        assert fuzzt.generic_jaro_winkler(list("martha"), list("marhta")) == pytest.approx(
            0.961, abs=0.001
        )


class TestJaroWinklerValidation:
    """Tests for Jaro-Winkler prefix_weight validation."""

    def test_prefix_weight_too_high_raises_error(self):
        with pytest.raises(fuzzt.ValidationError, match="prefix_weight must be in range"):
            fuzzt.jaro_winkler("hello", "hello", prefix_weight=0.26)

    def test_prefix_weight_negative_raises_error(self):
        with pytest.raises(fuzzt.ValidationError, match="prefix_weight must be in range"):
            fuzzt.jaro_winkler("hello", "hallo", prefix_weight=-0.01)

    def test_metric_object_validates(self):
        with pytest.raises(fuzzt.ValidationError):
            fuzzt.JaroWinkler(prefix_weight=1.0)

    def test_prefix_weight_boundary_values(self):
        assert fuzzt.jaro_winkler("hello", "hello", prefix_weight=0.0) == 1.0
        assert fuzzt.jaro_winkler("hello", "hello", prefix_weight=0.25) == 1.0

    def test_higher_weight_increases_score(self):
        default = fuzzt.jaro_winkler("prefix_test", "prefix_best")
        higher = fuzzt.jaro_winkler("prefix_test", "prefix_best", prefix_weight=0.2)
        assert higher >= default
        assert fuzzt.jaro_winkler("prefix_test", "prefix_best", prefix_weight=0.0) == fuzzt.jaro(
            "prefix_test", "prefix_best"
        )


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
