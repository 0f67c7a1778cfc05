"""Discrete cash dividend schedule.

Ex-dates are year fractions from today.  Iteration is always in ascending
ex-date order so present-value sums and early-exercise scans are
reproducible regardless of insertion order.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Iterator

from .curve import DiscountCurve

__all__ = ["DividendSchedule", "load_dividend_schedule"]


class DividendSchedule:
    """Ordered mapping ex-date -> cash amount.

    Re-adding an existing ex-date replaces its amount.  Amounts and
    ex-dates are not validated.
    """

    def __init__(self):
        self._dividends: dict[float, float] = {}

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[float, float]]) -> "DividendSchedule":
        schedule = cls()
        for ex_date, amount in pairs:
            schedule.add_dividend(ex_date, amount)
        return schedule

    def add_dividend(self, ex_date: float, amount: float) -> None:
        self._dividends[float(ex_date)] = float(amount)

    @property
    def dividends(self) -> tuple[tuple[float, float], ...]:
        """All ``(ex_date, amount)`` pairs, ascending by ex-date."""
        return tuple(sorted(self._dividends.items()))

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self.dividends)

    def __len__(self) -> int:
        return len(self._dividends)

    def __repr__(self) -> str:
        return f"DividendSchedule({list(self.dividends)!r})"

    def present_value(self, maturity: float, curve: DiscountCurve) -> float:
        """Discounted sum of dividends with ``ex_date <= maturity``."""
        total = 0.0
        for ex_date, amount in self.dividends:
            if ex_date > maturity:
                break
            total += amount * curve.discount_factor(ex_date)
        return total

    def has_dividends_before(self, maturity: float) -> bool:
        return any(ex_date <= maturity for ex_date in self._dividends)


# ---------------------------------------------------------------------------
# CSV loading
# ---------------------------------------------------------------------------

_REQUIRED_COLUMNS = ("ex_date", "amount")


def load_dividend_schedule(path: str | Path) -> DividendSchedule:
    """Build a schedule from a CSV file with ``ex_date,amount`` columns.

    Example
    -------
        ex_date,amount
        0.25,1.10
        0.50,2.00
    """
    p = Path(path)
    schedule = DividendSchedule()
    with p.open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fields = [c.strip() for c in (reader.fieldnames or [])]
        missing = [c for c in _REQUIRED_COLUMNS if c not in fields]
        if missing:
            raise ValueError(
                f"Dividend file {p} is missing columns: {', '.join(missing)}"
            )
        for row in reader:
            row = {k.strip(): v for k, v in row.items() if k is not None}
            schedule.add_dividend(float(row["ex_date"]), float(row["amount"]))
    return schedule
