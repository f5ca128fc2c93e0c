# country_stats/models/threshold.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Threshold:
    """
    Open numeric range used to scope a filter query.

    Either bound may be absent; with both absent the range is unbounded.
    min >= max is accepted and simply matches nothing.
    """

    min: Optional[int] = None
    max: Optional[int] = None

    @property
    def unbounded(self) -> bool:
        return self.min is None and self.max is None

    def contains(self, value: int) -> bool:
        # strict on both sides
        if self.min is not None and not value > self.min:
            return False
        if self.max is not None and not value < self.max:
            return False
        return True
