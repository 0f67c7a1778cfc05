"""Scenario configuration.

``DEFAULT_CONFIG`` is the reference scenario run by ``eqpricer scenarios``.
A YAML file passed with ``--config`` is deep-merged over it, so it only
needs the keys it changes::

    option:
      spot: 120.0
    discrete_dividends:
      - {ex_date: 0.25, amount: 1.5}
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Mapping

import yaml

from .dividends import DividendSchedule

DEFAULT_CONFIG: dict[str, Any] = {
    "option": {
        "spot": 100.0,
        "strike": 105.0,
        "maturity": 1.0,
        "rate": 0.05,
        "volatility": 0.20,
    },
    "dividend_yield": 0.03,
    "discrete_dividends": [{"ex_date": 0.5, "amount": 2.0}],
    "american_dividends": [{"ex_date": 0.5, "amount": 3.0}],
    "binomial": {"steps": 500},
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s %(levelname)s %(name)s - %(message)s",
        "file": None,
    },
}


def load_yaml_config(path: str | Path | None) -> dict[str, Any]:
    """Scenario settings from a YAML file; an empty file means no overrides."""
    if path is None:
        return {}

    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {p}") from None

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(
            f"{p}: expected a mapping of scenario settings, got {type(data).__name__}"
        )
    return dict(data)


def deep_merge(base: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """New dict with ``updates`` laid over ``base``; nested sections merge key by key."""
    merged = copy.deepcopy(dict(base))
    for key, value in updates.items():
        section = merged.get(key)
        if isinstance(value, Mapping) and isinstance(section, Mapping):
            merged[key] = deep_merge(section, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def build_config(
    yaml_path: str | Path | None = None,
    overrides: Mapping[str, Any] | None = None,
    *,
    defaults: Mapping[str, Any] = DEFAULT_CONFIG,
) -> dict[str, Any]:
    config = deep_merge(defaults, load_yaml_config(yaml_path))
    if overrides:
        config = deep_merge(config, overrides)
    return config


def schedule_from_config(entries) -> DividendSchedule:
    """Build a schedule from ``[{ex_date: ..., amount: ...}, ...]``."""
    schedule = DividendSchedule()
    for entry in entries or []:
        try:
            schedule.add_dividend(float(entry["ex_date"]), float(entry["amount"]))
        except (KeyError, TypeError) as e:
            raise ValueError(
                f"Dividend entries need 'ex_date' and 'amount', got {entry!r}"
            ) from e
    return schedule
