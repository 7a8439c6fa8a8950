"""Per-user xSteal session.

Owns the rolling attempt history and runs estimate -> score -> record for a
single "Successful Throw" / "Failed Attempt" action.  One session per
browser session; nothing here is shared between users.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional

import numpy as np
import pandas as pd

from steal_engine.core.errors import InvalidInput
from steal_engine.core.estimator import VariantLike, coerce_metric, estimate_probability
from steal_engine.core.history import AttemptHistory, AttemptRecord
from steal_engine.core.metrics import MetricVariant, get_variant
from steal_engine.core.scoring import compute_score

logger = logging.getLogger(__name__)

CALC_ERROR_MESSAGE = "Error calculating xSteal. Please verify input values."

_FRAME_COLUMNS = ["timestamp", "captured_at", "variant", "xsteal", "tokens", "was_successful"]


class StealSession:
    def __init__(
        self,
        variant: VariantLike = "standard",
        capacity: int = 10,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._variant = get_variant(variant)
        self.history = AttemptHistory(capacity)
        self._clock = clock
        self.last_error: Optional[str] = None

    @property
    def variant(self) -> MetricVariant:
        return self._variant

    def set_variant(self, variant: VariantLike) -> None:
        self._variant = get_variant(variant)

    def evaluate(self, metrics: Mapping[str, Any], was_successful: bool) -> AttemptRecord:
        """Score one attempt and append it to the history.

        Raises InvalidInput (and records nothing) when a metric is missing or
        not a finite number.
        """
        self.last_error = None
        v = self._variant
        try:
            xsteal = estimate_probability(metrics, v)
            tokens = compute_score(xsteal, was_successful)
            raw = {k: coerce_metric(k, metrics[k]) for k in v.keys}
        except InvalidInput as e:
            self.last_error = CALC_ERROR_MESSAGE
            logger.warning("xSteal calculation failed (%s): %s", e.field, e)
            raise

        attempt = AttemptRecord(
            metrics=raw,
            xsteal=xsteal,
            tokens=tokens,
            was_successful=bool(was_successful),
            captured_at=self._clock(),
            variant=v.name,
        )
        self.history.record(attempt)
        logger.info("Attempt %s [%s]: xSteal=%.3f tokens=%+.3f",
                    "out" if attempt.was_successful else "safe", v.name, xsteal, tokens)
        return attempt

    def attempts(self) -> List[AttemptRecord]:
        return self.history.all()

    def summary(self) -> Dict[str, Any]:
        attempts = self.history.all()
        n = len(attempts)
        outs = sum(1 for a in attempts if a.was_successful)
        return {
            "count": n,
            "outs": outs,
            "safes": n - outs,
            "total_tokens": float(sum(a.tokens for a in attempts)),
            "mean_xsteal": float(np.mean([a.xsteal for a in attempts])) if n else np.nan,
            "out_rate": outs / n if n else np.nan,
        }

    def history_frame(self) -> pd.DataFrame:
        """One row per attempt, oldest first, plus one column per recorded metric."""
        rows = [a.to_row() for a in self.history]
        if not rows:
            return pd.DataFrame(columns=_FRAME_COLUMNS)
        return pd.DataFrame(rows)

    def reset(self) -> None:
        self.history.clear()
        self.last_error = None
