from .errors import InvalidInput
from .metrics import MetricSpec, MetricVariant, METRICS, VARIANTS, get_variant
from .estimator import estimate_probability, metric_components
from .scoring import compute_score
from .history import AttemptHistory, AttemptRecord
from .session import CALC_ERROR_MESSAGE, StealSession

__all__ = [
    "AttemptHistory", "AttemptRecord", "CALC_ERROR_MESSAGE", "InvalidInput", "METRICS", "MetricSpec",
    "MetricVariant", "StealSession", "VARIANTS", "compute_score",
    "estimate_probability", "get_variant", "metric_components",
]
