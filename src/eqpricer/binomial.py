import logging
import numpy as np
from math import exp, sqrt

from .core import OptionParams, ValidationResult
from .exceptions import DegenerateInputError

logger = logging.getLogger(__name__)

VALIDATION_THRESHOLD_PCT = 0.1
_MIN_REFERENCE_PRICE = 1e-12


class BinomialTree:
    """Cox-Ross-Rubinstein lattice for European and American calls (no dividends)."""

    def __init__(self, spot: float, strike: float, maturity: float,
                 rate: float, volatility: float, steps: int = 500):
        if steps < 1:
            raise ValueError(f"steps must be >= 1, got {steps}")
        self._params = OptionParams(spot, strike, maturity, rate, volatility)
        self.steps = int(steps)

    @classmethod
    def from_engine(cls, engine, steps: int = 500) -> "BinomialTree":
        """Lattice sharing the parameters of a ``BlackScholesEngine``."""
        p = engine.params
        return cls(p.spot, p.strike, p.maturity, p.rate, p.volatility, steps)

    @property
    def params(self) -> OptionParams:
        return self._params

    def _setup(self):
        p = self._params
        if p.maturity <= 0 or p.volatility <= 0:
            raise DegenerateInputError(
                f"maturity and volatility must be positive, got "
                f"T={p.maturity}, sigma={p.volatility}"
            )
        N = self.steps
        dt = p.maturity / N
        u = exp(p.volatility * sqrt(dt))
        d = 1.0 / u
        prob = (exp(p.rate * dt) - d) / (u - d)
        if not (0.0 < prob < 1.0):
            raise DegenerateInputError(
                "Risk-neutral prob p out of (0,1); try larger steps or different params."
            )
        disc = exp(-p.rate * dt)
        return u, d, prob, disc

    def _terminal_values(self, u, d):
        p = self._params
        N = self.steps
        j = np.arange(N + 1)
        ST = p.spot * (u ** j) * (d ** (N - j))
        return np.maximum(ST - p.strike, 0.0)

    def price_european_call(self) -> float:
        u, d, prob, disc = self._setup()
        V = self._terminal_values(u, d)
        for _ in range(self.steps - 1, -1, -1):
            V = disc * (prob * V[1:] + (1.0 - prob) * V[:-1])
        return float(V[0])

    def price_american_call(self) -> float:
        u, d, prob, disc = self._setup()
        S0, K = self._params.spot, self._params.strike
        V = self._terminal_values(u, d)
        for k in range(self.steps - 1, -1, -1):
            hold = disc * (prob * V[1:] + (1.0 - prob) * V[:-1])
            j = np.arange(k + 1)
            S_k = S0 * (u ** j) * (d ** (k - j))
            V = np.maximum(hold, np.maximum(S_k - K, 0.0))
        return float(V[0])

    @staticmethod
    def validate(closed_form_price: float, lattice_price: float) -> ValidationResult:
        """Compare a closed-form price against a lattice price.

        ``passed`` when the percentage difference is below 0.1%.
        """
        if abs(closed_form_price) <= _MIN_REFERENCE_PRICE:
            raise DegenerateInputError(
                f"closed-form price too close to zero to validate against: "
                f"{closed_form_price}"
            )
        diff = abs(closed_form_price - lattice_price)
        pct = 100.0 * diff / closed_form_price
        result = ValidationResult(
            closed_form_price=closed_form_price,
            lattice_price=lattice_price,
            absolute_difference=diff,
            percent_difference=pct,
            passed=pct < VALIDATION_THRESHOLD_PCT,
        )
        if not result.passed:
            logger.warning(
                "Lattice price %.6f differs from closed form %.6f by %.4f%%",
                lattice_price, closed_form_price, pct,
            )
        return result
