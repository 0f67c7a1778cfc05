"""Tests for analytic Greeks."""

import pytest
from eqpricer import BlackScholesEngine, Greeks


def _engine(**kw):
    base = dict(spot=100, strike=100, maturity=1.0, rate=0.05, volatility=0.2)
    base.update(kw)
    return BlackScholesEngine(**base)


class TestGreekProperties:
    def test_delta_bounds(self):
        g = _engine().compute_greeks(0.0)
        assert 0 < g.delta < 1
        assert g.gamma > 0
        assert g.vega > 0

    def test_deep_itm_delta(self):
        assert _engine(spot=200).compute_greeks(0.0).delta > 0.9

    def test_deep_otm_delta(self):
        assert _engine(spot=50, strike=200).compute_greeks(0.0).delta < 0.1

    def test_atm_gamma_exceeds_otm(self):
        atm = _engine(strike=100).compute_greeks(0.0)
        otm = _engine(strike=150).compute_greeks(0.0)
        assert atm.gamma > otm.gamma

    def test_rho_positive(self):
        assert _engine().compute_greeks(0.0).rho > 0

    def test_theta_negative_without_yield(self):
        assert _engine().compute_greeks(0.0).theta < 0

    def test_yield_lowers_delta(self):
        assert _engine().compute_greeks(0.03).delta < _engine().compute_greeks(0.0).delta

    def test_immutable(self):
        g = _engine().compute_greeks(0.0)
        with pytest.raises(AttributeError):
            g.delta = 0.5

    def test_str_and_dict(self):
        g = Greeks(delta=0.5, gamma=0.02, vega=39.0, theta=-6.0, rho=50.0)
        assert str(g) == ("Greeks { Delta=0.5000, Gamma=0.0200, Vega=39.0000, "
                          "Theta=-6.0000, Rho=50.0000 }")
        assert set(g.as_dict()) == {"delta", "gamma", "vega", "theta", "rho"}


@pytest.mark.parametrize("q", [0.0, 0.03])
class TestGreeksVsFiniteDifferences:
    """Analytic Greeks agree with central differences of the closed form."""

    def test_delta_gamma(self, q):
        h = 0.01
        up = _engine(spot=100 + h).price_continuous_yield(q)
        mid = _engine().price_continuous_yield(q)
        dn = _engine(spot=100 - h).price_continuous_yield(q)
        g = _engine().compute_greeks(q)
        assert g.delta == pytest.approx((up - dn) / (2 * h), abs=1e-6)
        assert g.gamma == pytest.approx((up - 2 * mid + dn) / h ** 2, abs=1e-4)

    def test_vega(self, q):
        h = 1e-4
        up = _engine(volatility=0.2 + h).price_continuous_yield(q)
        dn = _engine(volatility=0.2 - h).price_continuous_yield(q)
        assert _engine().compute_greeks(q).vega == pytest.approx((up - dn) / (2 * h), abs=1e-4)

    def test_theta(self, q):
        h = 1e-4
        shorter = _engine(maturity=1.0 - h).price_continuous_yield(q)
        longer = _engine(maturity=1.0 + h).price_continuous_yield(q)
        expected = (shorter - longer) / (2 * h)
        assert _engine().compute_greeks(q).theta == pytest.approx(expected, abs=1e-4)

    def test_rho(self, q):
        h = 1e-4
        up = _engine(rate=0.05 + h).price_continuous_yield(q)
        dn = _engine(rate=0.05 - h).price_continuous_yield(q)
        assert _engine().compute_greeks(q).rho == pytest.approx((up - dn) / (2 * h), abs=1e-4)
