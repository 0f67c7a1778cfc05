import logging
from math import log, sqrt, exp, isfinite
from typing import Optional

from .core import OptionParams, Greeks
from .curve import DiscountCurve
from .dividends import DividendSchedule
from .exceptions import DividendExceedsSpotError, DegenerateInputError
from .normal import NormalDistribution, StandardNormal

logger = logging.getLogger(__name__)


def _d1_d2(S, K, T, r, q, sigma):
    if not isfinite(q):
        raise DegenerateInputError(f"dividend yield must be finite, got q={q}")
    if T <= 0 or sigma <= 0:
        raise DegenerateInputError(
            f"maturity and volatility must be positive, got T={T}, sigma={sigma}"
        )
    rt = sigma * sqrt(T)
    d1 = (log(S / K) + (r - q + 0.5 * sigma * sigma) * T) / rt
    d2 = d1 - rt
    return d1, d2


def _discount(rate, T):
    try:
        return exp(-rate * T)
    except OverflowError:
        raise DegenerateInputError(
            f"discount factor overflows for rate={rate}, T={T}"
        ) from None


class BlackScholesEngine:
    """Closed-form European call pricer with dividend adjustments.

    Parameters
    ----------
    spot, strike : float
        Underlying and strike prices (positive).
    maturity : float
        Years to expiry.
    rate : float
        Continuously-compounded risk-free rate.
    volatility : float
        Annualised volatility.
    normal : NormalDistribution, optional
        CDF/PDF provider.  Defaults to a fresh ``StandardNormal``.
    """

    def __init__(self, spot: float, strike: float, maturity: float,
                 rate: float, volatility: float, *,
                 normal: Optional[NormalDistribution] = None):
        self._params = OptionParams(spot, strike, maturity, rate, volatility)
        self._nd = normal if normal is not None else StandardNormal()

    @property
    def params(self) -> OptionParams:
        return self._params

    @property
    def spot(self) -> float:
        return self._params.spot

    @property
    def strike(self) -> float:
        return self._params.strike

    @property
    def maturity(self) -> float:
        return self._params.maturity

    @property
    def rate(self) -> float:
        return self._params.rate

    @property
    def volatility(self) -> float:
        return self._params.volatility

    def __repr__(self) -> str:
        p = self._params
        return (f"BlackScholesEngine(spot={p.spot}, strike={p.strike}, "
                f"maturity={p.maturity}, rate={p.rate}, volatility={p.volatility})")

    # -----------------------------------------------------------------------
    # Continuous dividend yield (Merton 1973)
    # -----------------------------------------------------------------------
    def price_continuous_yield(self, q: float = 0.0) -> float:
        """Call price with a continuous proportional dividend yield ``q``."""
        p = self._params
        d1, d2 = _d1_d2(p.spot, p.strike, p.maturity, p.rate, q, p.volatility)
        disc_r = _discount(p.rate, p.maturity)
        disc_q = _discount(q, p.maturity)
        return disc_q * p.spot * self._nd.cdf(d1) - disc_r * p.strike * self._nd.cdf(d2)

    # -----------------------------------------------------------------------
    # Discrete cash dividends (forward adjustment)
    # -----------------------------------------------------------------------
    def price_discrete_dividends(self, schedule: DividendSchedule,
                                 curve: DiscountCurve) -> float:
        """Call price with the spot reduced by the PV of dividends before expiry.

        Raises
        ------
        DividendExceedsSpotError
            If ``spot - PV(dividends) <= 0``.
        """
        p = self._params
        div_pv = schedule.present_value(p.maturity, curve)
        s_adj = p.spot - div_pv
        logger.debug("Dividend PV %.6f, adjusted spot %.6f", div_pv, s_adj)
        if s_adj <= 0:
            raise DividendExceedsSpotError(div_pv, p.spot)

        d1, d2 = _d1_d2(s_adj, p.strike, p.maturity, p.rate, 0.0, p.volatility)
        disc_r = _discount(p.rate, p.maturity)
        return s_adj * self._nd.cdf(d1) - disc_r * p.strike * self._nd.cdf(d2)

    # -----------------------------------------------------------------------
    # Greeks (continuous yield)
    # -----------------------------------------------------------------------
    def compute_greeks(self, q: float = 0.0) -> Greeks:
        """Analytic call Greeks.  Vega per unit vol, theta per year."""
        p = self._params
        S, K, T, r, sigma = p.spot, p.strike, p.maturity, p.rate, p.volatility
        d1, d2 = _d1_d2(S, K, T, r, q, sigma)
        N_d1 = self._nd.cdf(d1)
        N_d2 = self._nd.cdf(d2)
        n_d1 = self._nd.pdf(d1)
        disc_r = _discount(r, T)
        disc_q = _discount(q, T)
        sqrt_T = sqrt(T)

        delta = disc_q * N_d1
        gamma = disc_q * n_d1 / (S * sigma * sqrt_T)
        vega  = S * disc_q * n_d1 * sqrt_T
        theta = (-S * disc_q * n_d1 * sigma / (2 * sqrt_T)
                 - r * K * disc_r * N_d2
                 + q * S * disc_q * N_d1)
        rho   = K * T * disc_r * N_d2

        return Greeks(delta=delta, gamma=gamma, vega=vega, theta=theta, rho=rho)
