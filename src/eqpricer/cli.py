import argparse
import logging

from .american import AmericanPricer
from .binomial import BinomialTree
from .black_scholes import BlackScholesEngine
from .config import build_config, schedule_from_config
from .curve import DiscountCurve
from .dividends import DividendSchedule, load_dividend_schedule
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

_RULE = "-------------------------------------------"


def _dividend(s: str):
    try:
        ex_date, amount = s.split(":")
        return float(ex_date), float(amount)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"dividend must look like EX_DATE:AMOUNT (e.g. 0.5:2.0), got {s!r}"
        )


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--spot", type=float, required=True)
    parser.add_argument("--strike", type=float, required=True)
    parser.add_argument("--maturity", type=float, required=True, help="years")
    parser.add_argument("--rate", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--vol", type=float, required=True)


def add_dividend_args(parser: argparse.ArgumentParser):
    parser.add_argument("--dividend", type=_dividend, action="append", default=[],
                        metavar="EX_DATE:AMOUNT", help="repeatable cash dividend")
    parser.add_argument("--dividends-csv", dest="dividends_csv", default=None,
                        help="CSV file with ex_date,amount columns")


def add_logging_args(parser: argparse.ArgumentParser):
    parser.add_argument("--log-level", dest="log_level", default=None,
                        help="Logging level (e.g., INFO, DEBUG).")
    parser.add_argument("--log-file", dest="log_file", default=None,
                        help="Optional log file path.")


def _engine(args) -> BlackScholesEngine:
    return BlackScholesEngine(args.spot, args.strike, args.maturity, args.rate, args.vol)


def _schedule(args) -> DividendSchedule:
    if args.dividends_csv:
        schedule = load_dividend_schedule(args.dividends_csv)
    else:
        schedule = DividendSchedule()
    for ex_date, amount in args.dividend:
        schedule.add_dividend(ex_date, amount)
    return schedule


def cmd_bs(args):
    print(f"{_engine(args).price_continuous_yield(args.q):.10f}")


def cmd_discrete(args):
    engine = _engine(args)
    px = engine.price_discrete_dividends(_schedule(args), DiscountCurve(args.rate))
    print(f"{px:.10f}")


def cmd_greeks(args):
    print(_engine(args).compute_greeks(args.q))


def cmd_american(args):
    pricer = AmericanPricer(_engine(args), DiscountCurve(args.rate), _schedule(args))
    print(pricer.price_comparison())


def cmd_binomial(args):
    engine = _engine(args)
    tree = BinomialTree.from_engine(engine, args.N)
    px = tree.price_american_call() if args.american else tree.price_european_call()
    if args.validate:
        print(BinomialTree.validate(engine.price_continuous_yield(0.0), px))
    else:
        print(f"{px:.10f}")


def run_scenarios(config: dict) -> None:
    """Reference scenarios: yield, discrete dividend, Greeks, American, lattice."""
    o = config["option"]
    q = float(config["dividend_yield"])
    engine = BlackScholesEngine(o["spot"], o["strike"], o["maturity"], o["rate"], o["volatility"])
    curve = DiscountCurve(o["rate"])

    print(_RULE)
    print(f" SCENARIO 1: Continuous Dividend Yield ({q:.0%})")
    print(_RULE)
    print(f"  Stock Price  : ${engine.spot:.2f}")
    print(f"  Strike Price : ${engine.strike:.2f}")
    print(f"  Expiry       :  {engine.maturity:.1f} year")
    print(f"  Rate         :  {engine.rate:.0%}")
    print(f"  Volatility   :  {engine.volatility:.0%}")
    print(f"  Call Price   = ${engine.price_continuous_yield(q):.4f}")
    print()

    schedule = schedule_from_config(config["discrete_dividends"])
    div_pv = schedule.present_value(engine.maturity, curve)
    print(_RULE)
    print(" SCENARIO 2: Discrete Cash Dividends")
    print(_RULE)
    for ex_date, amount in schedule:
        print(f"  Dividend      : ${amount:.2f} at t={ex_date:.2f}")
    print(f"  PV of Dividend: ${div_pv:.4f}")
    print(f"  Adjusted Spot : ${engine.spot - div_pv:.4f}")
    print(f"  Call Price    = ${engine.price_discrete_dividends(schedule, curve):.4f}")
    print()

    g = engine.compute_greeks(q)
    print(_RULE)
    print(f" SCENARIO 3: Option Greeks (q = {q:.0%})")
    print(_RULE)
    print(f"  Delta : {g.delta:8.4f}  (price change per $1 stock move)")
    print(f"  Gamma : {g.gamma:8.4f}  (delta change per $1 stock move)")
    print(f"  Vega  : {g.vega:8.4f}  (price change per unit vol move)")
    print(f"  Theta : {g.theta:8.4f}  (price change per year)")
    print(f"  Rho   : {g.rho:8.4f}  (price change per unit rate move)")
    print()

    print(_RULE)
    print(" SCENARIO 4: American Call vs European Call")
    print(_RULE)
    american = AmericanPricer(engine, curve, schedule_from_config(config["american_dividends"]))
    print(american.price_comparison())
    print()

    steps = int(config["binomial"]["steps"])
    tree = BinomialTree.from_engine(engine, steps)
    print(_RULE)
    print(f" SCENARIO 5: Binomial Tree Validation ({steps} steps)")
    print(_RULE)
    print(BinomialTree.validate(engine.price_continuous_yield(0.0), tree.price_european_call()))


def cmd_scenarios(args):
    run_scenarios(args.config_data)


def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="eqpricer",
                                description="Dividend-adjusted Black-Scholes call pricer")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Continuous yield
    p_bs = sub.add_parser("bs", help="Black-Scholes price with continuous yield")
    add_common(p_bs)
    p_bs.add_argument("--q", type=float, default=0.0, help="cont. dividend yield")
    p_bs.set_defaults(func=cmd_bs)

    # Discrete dividends
    p_disc = sub.add_parser("discrete", help="Black-Scholes price with cash dividends")
    add_common(p_disc)
    add_dividend_args(p_disc)
    p_disc.set_defaults(func=cmd_discrete)

    # Greeks
    p_gr = sub.add_parser("greeks", help="Analytic Greeks")
    add_common(p_gr)
    p_gr.add_argument("--q", type=float, default=0.0, help="cont. dividend yield")
    p_gr.set_defaults(func=cmd_greeks)

    # American
    p_am = sub.add_parser("american", help="American vs European with cash dividends")
    add_common(p_am)
    add_dividend_args(p_am)
    p_am.set_defaults(func=cmd_american)

    # Binomial
    p_bin = sub.add_parser("binomial", help="CRR binomial price")
    add_common(p_bin)
    p_bin.add_argument("--N", type=int, default=500)
    p_bin.add_argument("--american", action="store_true")
    p_bin.add_argument("--validate", action="store_true",
                       help="compare the lattice price with the closed form")
    p_bin.set_defaults(func=cmd_binomial)

    # Reference scenarios
    p_sc = sub.add_parser("scenarios", help="Run the reference scenarios")
    p_sc.add_argument("--config", default=None, help="Path to a YAML config file.")
    p_sc.set_defaults(func=cmd_scenarios)

    for sp in (p_bs, p_disc, p_gr, p_am, p_bin, p_sc):
        add_logging_args(sp)

    args = p.parse_args(argv)

    try:
        config = build_config(getattr(args, "config", None))
    except (OSError, ValueError) as e:
        p.error(str(e))
    log_cfg = config["logging"]
    setup_logging(
        args.log_level or log_cfg["level"],
        fmt=log_cfg["format"],
        log_file=args.log_file or log_cfg["file"],
    )
    args.config_data = config

    try:
        args.func(args)
    except ValueError as e:
        # PricingError and invalid option or lattice parameters alike
        logger.error("%s", e)
        p.exit(2, f"eqpricer: error: {e}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
