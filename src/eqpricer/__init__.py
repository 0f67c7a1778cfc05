# eqpricer — dividend-adjusted Black-Scholes engine for equity calls
# Public API

# Value types and errors
from .core import OptionParams, Greeks, ValidationResult, PriceComparison
from .exceptions import PricingError, DividendExceedsSpotError, DegenerateInputError

# Market inputs
from .curve import DiscountCurve
from .dividends import DividendSchedule, load_dividend_schedule
from .normal import NormalDistribution, StandardNormal, ScipyNormal

# Pricers
from .black_scholes import BlackScholesEngine
from .american import AmericanPricer
from .binomial import BinomialTree

# Model validation
from .validation import cross_validate, convergence_analysis

__all__ = [
    # Value types
    "OptionParams", "Greeks", "ValidationResult", "PriceComparison",
    # Errors
    "PricingError", "DividendExceedsSpotError", "DegenerateInputError",
    # Market inputs
    "DiscountCurve", "DividendSchedule", "load_dividend_schedule",
    "NormalDistribution", "StandardNormal", "ScipyNormal",
    # Pricers
    "BlackScholesEngine", "AmericanPricer", "BinomialTree",
    # Validation
    "cross_validate", "convergence_analysis",
]

__version__ = "0.1.0"
