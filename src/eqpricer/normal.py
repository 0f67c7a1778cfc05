# normal.py
# Standard-normal CDF / PDF providers used by the closed-form pricer.

from __future__ import annotations
from math import erfc, exp, pi, sqrt
from typing import Protocol, runtime_checkable

from scipy.stats import norm

_INV_SQRT_2PI = 1.0 / sqrt(2.0 * pi)
_INV_SQRT_2 = 1.0 / sqrt(2.0)


@runtime_checkable
class NormalDistribution(Protocol):
    """Anything exposing ``cdf`` and ``pdf`` of N(0, 1)."""

    def cdf(self, x: float) -> float: ...

    def pdf(self, x: float) -> float: ...


class StandardNormal:
    """Default provider on ``math.erfc``.

    ``0.5 * erfc(-x / sqrt(2))`` keeps full relative precision in the lower
    tail, where ``0.5 * (1 + erf(x / sqrt(2)))`` cancels to zero.
    """

    def cdf(self, x: float) -> float:
        return 0.5 * erfc(-x * _INV_SQRT_2)

    def pdf(self, x: float) -> float:
        return exp(-0.5 * x * x) * _INV_SQRT_2PI


class ScipyNormal:
    """Provider backed by ``scipy.stats.norm`` (returns Python floats)."""

    def cdf(self, x: float) -> float:
        return float(norm.cdf(x))

    def pdf(self, x: float) -> float:
        return float(norm.pdf(x))
