from __future__ import annotations

from typing import Any

from steal_engine.core.estimator import coerce_metric


def compute_score(probability: Any, was_successful: bool) -> float:
    """Token reward for one attempt.

    An out earns ``1 - p``: throwing out a runner who was unlikely to be out
    pays close to 1.  A safe runner costs ``p``: missing a likely out costs
    close to 1.  Always in [-1, 1].
    """
    p = max(0.0, min(1.0, coerce_metric("probability", probability)))
    if was_successful:
        return 1.0 - p
    return -p
