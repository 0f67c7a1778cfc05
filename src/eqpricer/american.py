"""American call with discrete dividends.

European forward-adjusted price plus a simplified early-exercise premium.
The premium is a heuristic, not a free-boundary solve: for every dividend
paid before expiry that exceeds the interest cost of carrying the strike
to expiry, 1% of the dividend amount is added.
"""

from __future__ import annotations

import logging

from .black_scholes import BlackScholesEngine
from .core import PriceComparison
from .curve import DiscountCurve
from .dividends import DividendSchedule

logger = logging.getLogger(__name__)

__all__ = ["AmericanPricer", "EARLY_EXERCISE_SCALE"]

EARLY_EXERCISE_SCALE = 0.01


class AmericanPricer:
    """Wraps an engine, curve and schedule; none of them is owned or mutated."""

    def __init__(self, engine: BlackScholesEngine, curve: DiscountCurve,
                 schedule: DividendSchedule):
        self.engine = engine
        self.curve = curve
        self.schedule = schedule

    def price_american_call(self) -> float:
        european = self.engine.price_discrete_dividends(self.schedule, self.curve)
        return european + self.early_exercise_premium()

    def early_exercise_premium(self) -> float:
        T = self.engine.maturity
        r = self.engine.rate
        K = self.engine.strike
        S = self.engine.spot

        premium = 0.0
        for ex_date, amount in self.schedule:
            if ex_date >= T:
                continue
            interest_cost = r * K * (T - ex_date)
            if amount > interest_cost:
                exercise_probability = amount / S
                premium += exercise_probability * S * EARLY_EXERCISE_SCALE
                logger.info(
                    "Early exercise optimal at t=%.2f: dividend %.2f > interest cost %.2f",
                    ex_date, amount, interest_cost,
                )
        return premium

    def price_comparison(self) -> PriceComparison:
        european = self.engine.price_discrete_dividends(self.schedule, self.curve)
        american = self.price_american_call()
        return PriceComparison(european=european, american=american,
                               premium=american - european)
