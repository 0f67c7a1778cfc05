"""
Exceptions raised by the pricing core.

Every pricing failure derives from ``PricingError``, itself a ``ValueError``,
so callers that only care about bad inputs can catch the builtin.
"""


class PricingError(ValueError):
    """Base exception for all pricing failures."""

    pass


class DividendExceedsSpotError(PricingError):
    """Raised when the dividend present value leaves no positive adjusted spot."""

    def __init__(self, dividend_pv: float, spot: float) -> None:
        self.dividend_pv = dividend_pv
        self.spot = spot
        super().__init__(
            f"Dividend PV ({dividend_pv:.6f}) exceeds spot price ({spot:.6f})"
        )


class DegenerateInputError(PricingError):
    """Raised when inputs would divide by zero or break the lattice."""

    pass
