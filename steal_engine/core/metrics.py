"""Metric definitions and weighted metric-set variants.

Every metric is normalized into [0, 1] from a raw measurement.  "lower"
metrics score 1.0 at or below ``anchor - span`` and 0.0 at or above
``anchor``; "higher" metrics score 0.0 at or below ``anchor`` and 1.0 at or
above ``anchor + span``.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

from steal_engine.core.errors import InvalidInput

logger = logging.getLogger(__name__)

LOWER = "lower"
HIGHER = "higher"


@dataclass(frozen=True)
class MetricSpec:
    key: str
    label: str
    unit: str
    min_value: float  # UI range hint only; the estimator clamps instead
    max_value: float
    direction: str  # LOWER | HIGHER (for the defense)
    anchor: float
    span: float
    step: float = 0.1
    default: float = 0.0

    def __post_init__(self):
        if self.direction not in (LOWER, HIGHER):
            raise ValueError(f"direction must be '{LOWER}' or '{HIGHER}', got {self.direction!r}")
        if self.span <= 0:
            raise ValueError(f"span must be positive for {self.key}")

    def normalize(self, value: float) -> float:
        if self.direction == LOWER:
            raw = (self.anchor - value) / self.span
        else:
            raw = (value - self.anchor) / self.span
        return float(max(0.0, min(1.0, raw)))


PITCHER_TIME = MetricSpec(
    key="pitcher_time", label="Pitcher Time to Plate", unit="s",
    min_value=1.2, max_value=2.5, direction=LOWER, anchor=2.0, span=0.5,
    step=0.1, default=1.8,
)
# NOTE: a faster runner raises xSteal here, i.e. it raises the odds of an out.
# That reads backwards for the defense but matches the observed formula.
RUNNER_SPEED = MetricSpec(
    key="runner_speed", label="Runner Speed", unit="ft/s",
    min_value=23.0, max_value=32.0, direction=HIGHER, anchor=25.0, span=5.0,
    step=0.1, default=27.5,
)
JUMP_QUALITY = MetricSpec(
    key="jump_quality", label="Jump Quality", unit="0-100",
    min_value=0.0, max_value=100.0, direction=HIGHER, anchor=0.0, span=100.0,
    step=1.0, default=75.0,
)
POP_TIME = MetricSpec(
    key="pop_time", label="Catcher Pop Time", unit="s",
    min_value=1.7, max_value=2.2, direction=LOWER, anchor=2.0, span=0.3,
    step=0.01, default=1.9,
)
THROW_VELO = MetricSpec(
    key="throw_velo", label="Catcher Throw Velocity", unit="mph",
    min_value=75.0, max_value=90.0, direction=HIGHER, anchor=75.0, span=15.0,
    step=0.5, default=82.0,
)

METRICS: Dict[str, MetricSpec] = {
    m.key: m for m in (PITCHER_TIME, RUNNER_SPEED, JUMP_QUALITY, POP_TIME, THROW_VELO)
}


@dataclass(frozen=True)
class MetricVariant:
    """A named, weighted set of metrics.  Weights are expected to sum to 1."""

    name: str
    label: str
    weights: Mapping[str, float] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        unknown = [k for k in self.weights if k not in METRICS]
        if unknown:
            raise ValueError(f"Unknown metrics in variant {self.name!r}: {unknown}")
        if any(w < 0 for w in self.weights.values()):
            raise ValueError(f"Variant {self.name!r} has a negative weight")
        # Read-only view; the dataclass is frozen but a dict would not be.
        object.__setattr__(self, "weights", MappingProxyType(dict(self.weights)))
        total = sum(self.weights.values())
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            logger.warning("Variant %s weights sum to %.4f, not 1.0", self.name, total)

    @property
    def metrics(self) -> Tuple[MetricSpec, ...]:
        return tuple(METRICS[k] for k in self.weights)

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(self.weights)

    def defaults(self) -> Dict[str, float]:
        return {m.key: m.default for m in self.metrics}


STANDARD = MetricVariant(
    name="standard",
    label="3-metric",
    weights={"pitcher_time": 0.4, "runner_speed": 0.3, "jump_quality": 0.3},
)
EXTENDED = MetricVariant(
    name="extended",
    label="5-metric",
    weights={
        "pitcher_time": 0.25, "runner_speed": 0.2, "jump_quality": 0.15,
        "pop_time": 0.25, "throw_velo": 0.15,
    },
)

VARIANTS: Mapping[str, MetricVariant] = MappingProxyType({v.name: v for v in (STANDARD, EXTENDED)})


def get_variant(variant: Union[str, MetricVariant]) -> MetricVariant:
    """Resolve a variant name (case-insensitive) or pass a variant through."""
    if isinstance(variant, MetricVariant):
        return variant
    name = str(variant or "").strip().lower()
    try:
        return VARIANTS[name]
    except KeyError:
        raise InvalidInput(f"Unknown metric variant: {variant!r}", field="variant") from None
