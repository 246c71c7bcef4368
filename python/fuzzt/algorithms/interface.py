"""Capability interface shared by every metric."""

from typing import Protocol, Union, runtime_checkable

from fuzzt.enums import Feature

Score = Union[int, float]


@runtime_checkable
class SimilarityMetric(Protocol):
    """Anything that scores a pair of strings.

    Distances return a non-negative ``int`` (0 means identical); similarities
    and normalized scores return a ``float`` in [0.0, 1.0].
    """

    def compute_metric(self, a: str, b: str) -> Score: ...


class BaseMetric:
    """Base for the bundled metric objects.

    Subclasses set ``feature`` to the family they belong to and implement
    ``compute_metric``. Instances are stateless and may be shared across
    threads.
    """

    feature: Feature

    def compute_metric(self, a: str, b: str) -> Score:
        raise NotImplementedError

    def __call__(self, a: str, b: str) -> Score:
        return self.compute_metric(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["Score", "SimilarityMetric", "BaseMetric"]
