"""Tests for the model validation helpers."""

from eqpricer import BlackScholesEngine
from eqpricer.validation import cross_validate, convergence_analysis

ENGINE = BlackScholesEngine(spot=100, strike=100, maturity=1.0, rate=0.05, volatility=0.2)


class TestCrossValidate:
    def test_passes_at_500_steps(self):
        result = cross_validate(ENGINE, steps=500)
        assert result.passed
        assert result.closed_form_price == ENGINE.price_continuous_yield(0.0)

    def test_coarse_tree_fails(self):
        assert not cross_validate(ENGINE, steps=2).passed


class TestConvergenceAnalysis:
    def test_tree_convergence(self):
        result = convergence_analysis(ENGINE, [50, 100, 200, 400])
        assert result["errors"][-1] < result["errors"][0]
        assert result["params"] == [50, 100, 200, 400]

    def test_order_positive(self):
        result = convergence_analysis(ENGINE, [50, 100, 200, 400])
        assert result["order"] > 0

    def test_american_matches_european_without_dividends(self):
        eu = convergence_analysis(ENGINE, [100, 200])
        am = convergence_analysis(ENGINE, [100, 200], american=True)
        for a, b in zip(eu["prices"], am["prices"]):
            assert abs(a - b) < 1e-8
