from __future__ import annotations
from dataclasses import dataclass, asdict
from math import isfinite


# ---------------------------------------------------------------------------
# Contract parameters
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OptionParams:
    """Immutable inputs of a single equity call.

    Parameters
    ----------
    spot : float
        Current underlying price.
    strike : float
        Strike price.
    maturity : float
        Time to expiry in years.  Zero is accepted here but rejected by the
        pricers as degenerate input.
    rate : float
        Continuously-compounded risk-free rate.
    volatility : float
        Annualised volatility.  Zero is accepted here but rejected by the
        pricers as degenerate input.
    """
    spot: float
    strike: float
    maturity: float   # years
    rate: float       # continuous risk-free
    volatility: float

    def __post_init__(self):
        for name in ("spot", "strike", "maturity", "rate", "volatility"):
            value = getattr(self, name)
            if not isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
        if self.spot <= 0:
            raise ValueError(f"spot must be positive, got {self.spot}")
        if self.strike <= 0:
            raise ValueError(f"strike must be positive, got {self.strike}")
        if self.maturity < 0:
            raise ValueError(f"maturity must be non-negative, got {self.maturity}")
        if self.volatility < 0:
            raise ValueError(f"volatility must be non-negative, got {self.volatility}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Greeks:
    """Analytic sensitivities of a call.

    Vega is dPrice/dSigma (absolute), theta is dPrice/dt per year,
    rho is dPrice/dr (absolute).
    """
    delta: float
    gamma: float
    vega: float
    theta: float
    rho: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"Greeks {{ Delta={self.delta:.4f}, Gamma={self.gamma:.4f}, "
            f"Vega={self.vega:.4f}, Theta={self.theta:.4f}, Rho={self.rho:.4f} }}"
        )


@dataclass(frozen=True)
class ValidationResult:
    """Closed-form vs lattice comparison; ``passed`` iff percent diff < 0.1."""
    closed_form_price: float
    lattice_price: float
    absolute_difference: float
    percent_difference: float
    passed: bool

    def __str__(self) -> str:
        line = "+--------------------------------------+"
        status = "PASSED" if self.passed else "FAILED"
        return "\n".join([
            line,
            "|     Binomial Tree Validation         |",
            line,
            f"|  Black-Scholes Price :  {self.closed_form_price:9.4f}   |",
            f"|  Binomial Tree Price :  {self.lattice_price:9.4f}   |",
            f"|  Difference          :  {self.absolute_difference:9.4f}   |",
            f"|  Percentage Diff     :  {self.percent_difference:8.4f}%  |",
            f"|  Validation          :  {status:<10s}   |",
            line,
        ])


@dataclass(frozen=True)
class PriceComparison:
    """European vs American price of the same dividend-paying call."""
    european: float
    american: float
    premium: float

    def __str__(self) -> str:
        return "\n".join([
            f"  European Call Price  : ${self.european:.4f}",
            f"  American Call Price  : ${self.american:.4f}",
            f"  Early Exercise Prem. : ${self.premium:.4f}",
        ])
