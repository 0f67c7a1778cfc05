"""Model validation helpers.

Cross-checks the closed-form Black-Scholes price against the independent
CRR lattice, and measures how fast the lattice converges as steps grow.
"""

from __future__ import annotations

import numpy as np
from typing import Optional

from .binomial import BinomialTree
from .black_scholes import BlackScholesEngine
from .core import ValidationResult

__all__ = [
    "cross_validate",
    "convergence_analysis",
]


# ---------------------------------------------------------------------------
# Closed form vs lattice
# ---------------------------------------------------------------------------

def cross_validate(engine: BlackScholesEngine, steps: int = 500) -> ValidationResult:
    """Validate ``engine.price_continuous_yield(0)`` against a European lattice."""
    bs = engine.price_continuous_yield(0.0)
    tree = BinomialTree.from_engine(engine, steps).price_european_call()
    return BinomialTree.validate(bs, tree)


# ---------------------------------------------------------------------------
# Convergence analysis
# ---------------------------------------------------------------------------

def convergence_analysis(
    engine: BlackScholesEngine,
    steps_values: list | np.ndarray,
    *,
    american: bool = False,
    reference: Optional[float] = None,
) -> dict:
    """Lattice price error versus the closed form as the step count varies.

    Parameters
    ----------
    engine : BlackScholesEngine
        Supplies the option parameters and the default reference price.
    steps_values : array-like of int
        Step counts to evaluate.
    american : bool
        Price the American lattice instead of the European one.
    reference : float, optional
        True price for error computation.  Default: closed form with q=0.

    Returns
    -------
    dict
        ``"params"``, ``"prices"``, ``"errors"``, ``"order"`` (estimated).
    """
    steps_values = [int(n) for n in steps_values]

    if reference is None:
        reference = engine.price_continuous_yield(0.0)

    prices = []
    for n in steps_values:
        tree = BinomialTree.from_engine(engine, n)
        p = tree.price_american_call() if american else tree.price_european_call()
        prices.append(p)

    errors = [abs(p - reference) for p in prices]

    # error ~ C / N^order  => log(e) = -order * log(N) + const
    order = float("nan")
    valid = [(n, e) for n, e in zip(steps_values, errors) if e > 0]
    if len(valid) >= 2:
        log_n = np.log([n for n, _ in valid])
        log_e = np.log([e for _, e in valid])
        coeffs = np.polyfit(log_n, log_e, 1)
        order = -float(coeffs[0])

    return {
        "params": steps_values,
        "prices": prices,
        "errors": errors,
        "order": order,
    }
