"""xSteal probability estimator.

Maps a set of raw metrics to the probability that the defense throws the
runner out.  Each metric is normalized into [0, 1] (clamped, never rejected
for being out of its nominal range), weighted by the active variant, and the
sum is clamped to [0, 1].
"""
from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any, Dict, Mapping, Union

import numpy as np

from steal_engine.core.errors import InvalidInput
from steal_engine.core.metrics import MetricVariant, get_variant

VariantLike = Union[str, MetricVariant]

_REAL_TYPES = (Real, Decimal, np.integer, np.floating)


def _is_bad(x: Any) -> bool:
    return x is None or not np.isfinite(x)


def coerce_metric(key: str, value: Any) -> float:
    """Return ``value`` as a finite float or raise InvalidInput.

    Real numbers only: ints, floats, Decimals and numpy integer/floating
    scalars.  Bools and complex values are rejected.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, _REAL_TYPES):
        raise InvalidInput(f"{key} must be a number, got {value!r}", field=key)
    try:
        out = float(value)
    except (OverflowError, ValueError):
        raise InvalidInput(f"{key} is not a finite number: {value!r}", field=key) from None
    if _is_bad(out):
        raise InvalidInput(f"{key} must be finite, got {value!r}", field=key)
    return out


def metric_components(metrics: Mapping[str, Any], variant: VariantLike = "standard") -> Dict[str, float]:
    """Normalized [0, 1] component per metric, in the variant's metric order."""
    v = get_variant(variant)
    if metrics is None:
        raise InvalidInput("No metrics supplied")
    out = {}
    for spec in v.metrics:
        if spec.key not in metrics:
            raise InvalidInput(f"Missing metric: {spec.key}", field=spec.key)
        out[spec.key] = spec.normalize(coerce_metric(spec.key, metrics[spec.key]))
    return out


def estimate_probability(metrics: Mapping[str, Any], variant: VariantLike = "standard") -> float:
    """Return xSteal in [0, 1] for ``metrics`` under ``variant``.

    Keys the variant does not use are ignored.
    """
    v = get_variant(variant)
    components = metric_components(metrics, v)
    xsteal = sum(components[k] * w for k, w in v.weights.items())
    return float(max(0.0, min(1.0, xsteal)))
