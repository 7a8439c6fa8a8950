from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Deque, Dict, Iterator, List, Mapping, Optional

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%I:%M:%S %p"


@dataclass(frozen=True)
class AttemptRecord:
    """One evaluated steal attempt.  ``was_successful`` means the runner was thrown out."""

    metrics: Mapping[str, float] = field(hash=False)
    xsteal: float
    tokens: float
    was_successful: bool
    captured_at: datetime
    variant: str = "standard"
    timestamp: str = field(default="", compare=False)

    def __post_init__(self):
        object.__setattr__(self, "metrics", MappingProxyType(dict(self.metrics)))
        if not self.timestamp:
            object.__setattr__(self, "timestamp", self.captured_at.strftime(TIMESTAMP_FORMAT))

    def to_row(self) -> Dict[str, Any]:
        row = {
            "timestamp": self.timestamp,
            "captured_at": self.captured_at,
            "variant": self.variant,
            "xsteal": self.xsteal,
            "tokens": self.tokens,
            "was_successful": self.was_successful,
        }
        row.update(self.metrics)
        return row


class AttemptHistory:
    """Bounded FIFO of attempts, oldest first.

    Appending to a full buffer evicts the oldest record.  Not thread-safe:
    append-and-evict needs a lock if more than one writer shares a buffer.
    """

    def __init__(self, capacity: int = 10):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ValueError(f"capacity must be a positive int, got {capacity!r}")
        self._capacity = capacity
        self._items: Deque[AttemptRecord] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, attempt: AttemptRecord) -> None:
        if len(self._items) == self._capacity:
            logger.debug("History full (%d), evicting attempt from %s",
                         self._capacity, self._items[0].timestamp)
        self._items.append(attempt)

    def all(self) -> List[AttemptRecord]:
        return list(self._items)

    def latest(self) -> Optional[AttemptRecord]:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[AttemptRecord]:
        return iter(list(self._items))

    def __bool__(self) -> bool:
        return bool(self._items)
