"""A continuous numeric range mapped onto a pixel domain."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class ContinuousRange:
    """Bounds of a set of numbers and the pixel length they map onto."""

    min: float = 0.0
    max: float = 0.0
    domain: int = 0
    descending: bool = False

    def is_zero(self) -> bool:
        """True when neither bounds nor domain have been set."""
        return (
            (self.min == 0 or math.isnan(self.min))
            and (self.max == 0 or math.isnan(self.max))
            and self.domain == 0
        )

    def delta(self) -> float:
        return self.max - self.min

    def __str__(self) -> str:
        if self.delta() == 0:
            return "ContinuousRange [empty]"
        return f"ContinuousRange [{self.min:.2f},{self.max:.2f}] => {self.domain}"

    def translate(self, value: float) -> int:
        """Map a value into the pixel domain."""
        delta = self.delta()
        normalized = value - self.min
        scaled = normalized / delta * self.domain if delta else math.nan
        if not math.isfinite(scaled):
            scaled = 0.0
        offset = int(math.ceil(scaled))
        if self.descending:
            return self.domain - offset
        return offset