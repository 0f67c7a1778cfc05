from __future__ import annotations
from dataclasses import dataclass
from math import exp


@dataclass(frozen=True)
class DiscountCurve:
    """Flat continuously-compounded discount curve."""
    rate: float   # e.g. 0.05 = 5%

    def discount_factor(self, t: float) -> float:
        """``exp(-rate * t)``; ``t`` in years."""
        return exp(-self.rate * t)
