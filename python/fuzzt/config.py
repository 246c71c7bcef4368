"""Feature toggles for metric families.

Each metric family can be enabled or disabled. Disabled families are not
offered by the name-based metric registry, so the ranking and batch APIs
refuse them. The enabled set is read once from the ``FUZZT_FEATURES``
environment variable (comma-separated feature names); when it is unset or
blank every family is enabled.

Example:
    $ FUZZT_FEATURES=levenshtein,jaro python app.py

    >>> from fuzzt import config
    >>> config.configure(["levenshtein"])
    >>> config.is_enabled("jaro")
    False
    >>> config.reset()
"""

import logging
import os
from typing import FrozenSet, Iterable, Optional, Union

from fuzzt.enums import Feature
from fuzzt.errors import ValidationError

logger = logging.getLogger(__name__)

ENV_VAR = "FUZZT_FEATURES"

DEFAULT_FEATURES = frozenset(Feature)


class _FeatureState:
    """Encapsulates the resolved feature set to avoid global variables."""

    value: Optional[FrozenSet[Feature]] = None


_feature_state = _FeatureState()


def _parse_feature(name: Union[str, Feature]) -> Feature:
    if isinstance(name, Feature):
        return name
    if not isinstance(name, str):
        raise TypeError(f"feature must be str or Feature enum, got {type(name).__name__}")
    try:
        return Feature(name.strip().lower())
    except ValueError:
        raise ValidationError(
            f"Unknown feature: '{name}'. Valid options: {sorted(f.value for f in Feature)}"
        ) from None


def _from_environment() -> FrozenSet[Feature]:
    raw = os.environ.get(ENV_VAR, "")
    names = [part for part in raw.split(",") if part.strip()]
    if not names:
        return DEFAULT_FEATURES
    return frozenset(_parse_feature(name) for name in names)


def enabled_features() -> FrozenSet[Feature]:
    """Return the set of enabled metric families."""
    if _feature_state.value is None:
        _feature_state.value = _from_environment()
        logger.debug(
            "Resolved fuzzt features: %s",
            ", ".join(sorted(f.value for f in _feature_state.value)),
        )
    return _feature_state.value


def is_enabled(feature: Union[str, Feature]) -> bool:
    return _parse_feature(feature) in enabled_features()


def configure(features: Iterable[Union[str, Feature]]) -> None:
    """Replace the enabled feature set.

    Args:
        features: Feature names or Feature enum members to enable. Every
            family not listed is disabled.

    Raises:
        ValidationError: If a feature name is not recognized.
    """
    _feature_state.value = frozenset(_parse_feature(f) for f in features)
    logger.debug(
        "Configured fuzzt features: %s",
        ", ".join(sorted(f.value for f in _feature_state.value)),
    )


def reset() -> None:
    """Forget any override; the next lookup re-reads the environment."""
    _feature_state.value = None


__all__ = ["ENV_VAR", "DEFAULT_FEATURES", "enabled_features", "is_enabled", "configure", "reset"]
