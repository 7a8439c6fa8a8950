"""xSteal scoring engine.

Estimates the probability that a stolen-base attempt is thrown out from a
handful of kinematic inputs, turns that probability plus the outcome into a
signed token reward, and keeps a rolling window of attempts for display.
No UI imports live in this package.
"""

from .core.errors import InvalidInput
from .core.metrics import MetricSpec, MetricVariant, VARIANTS, get_variant
from .core.estimator import estimate_probability, metric_components
from .core.scoring import compute_score
from .core.history import AttemptHistory, AttemptRecord
from .core.session import CALC_ERROR_MESSAGE, StealSession

__all__ = [
    "AttemptHistory",
    "AttemptRecord",
    "CALC_ERROR_MESSAGE",
    "InvalidInput",
    "MetricSpec",
    "MetricVariant",
    "StealSession",
    "VARIANTS",
    "compute_score",
    "estimate_probability",
    "get_variant",
    "metric_components",
]
