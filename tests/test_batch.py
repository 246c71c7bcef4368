"""Tests for the list-based batch helpers."""

import pytest

import fuzzt
from fuzzt import batch


class TestSimilarity:
    def test_input_order_preserved(self):
        results = batch.similarity(["hello", "hallo", "world"], "helo")
        assert [r.text for r in results] == ["hello", "hallo", "world"]
        assert [r.id for r in results] == [0, 1, 2]
        assert [r.score for r in results] == pytest.approx([0.8, 0.6, 0.2])

    def test_named_metric(self):
        results = batch.similarity(["kitten", "sitting"], "sitting", metric="levenshtein")
        assert [r.score for r in results] == [3, 0]

    def test_empty_list(self):
        assert batch.similarity([], "query") == []

    def test_non_string_item(self):
        with pytest.raises(TypeError):
            batch.similarity(["ok", 3], "ok")


class TestBestMatches:
    def test_limit_and_stable_ties(self):
        matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
        assert [m.text for m in matches] == ["apple", "apply"]

    def test_min_similarity(self):
        matches = batch.best_matches(["hello", "hallo", "world"], "helo", min_similarity=0.7)
        assert [m.text for m in matches] == ["hello"]

    def test_default_limit(self):
        strings = [f"item{i}" for i in range(10)]
        assert len(batch.best_matches(strings, "item")) == 5


class TestPairwise:
    def test_aligned_pairs(self):
        assert batch.pairwise(["hello", "world"], ["hallo", "word"]) == pytest.approx([0.8, 0.8])

    def test_distance_metric(self):
        assert batch.pairwise(["hello", "world"], ["hallo", "word"], metric="levenshtein") == [1, 1]

    def test_length_mismatch(self):
        with pytest.raises(fuzzt.ValidationError, match="same length"):
            batch.pairwise(["a", "b"], ["a"])

    def test_hamming_error_propagates(self):
        with pytest.raises(fuzzt.LengthMismatchError):
            batch.pairwise(["abc"], ["ab"], metric="hamming")


class TestSimilarityMatrix:
    def test_shape_and_values(self):
        matrix = batch.similarity_matrix(["hello", "world"], ["hallo", "word", "help"])
        assert len(matrix) == 2
        assert all(len(row) == 3 for row in matrix)
        assert matrix[0][0] == pytest.approx(0.8)
        assert matrix[1][1] == pytest.approx(0.8)

    def test_callable_metric(self):
        matrix = batch.similarity_matrix(["ab"], ["abc", "a"], metric=lambda a, b: len(a) + len(b))
        assert matrix == [[5, 3]]

    def test_disabled_metric(self):
        fuzzt.config.configure(["levenshtein"])
        with pytest.raises(fuzzt.AlgorithmError):
            batch.similarity_matrix(["a"], ["b"], metric="jaro")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
