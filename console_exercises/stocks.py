"""Stock price statistics over a fixed series of samples."""

from __future__ import annotations

import itertools
import statistics
from collections.abc import Sequence
from dataclasses import dataclass

from rich.console import Console

from console_exercises.exceptions import EmptySeriesError


def average_price(prices: Sequence[float]) -> float:
    """Arithmetic mean of the samples."""
    if not prices:
        raise EmptySeriesError("Cannot average an empty price series.")
    return statistics.fmean(prices)


def maximum_price(prices: Sequence[float]) -> float:
    if not prices:
        raise EmptySeriesError("Cannot take the maximum of an empty price series.")
    return max(prices)


def count_occurrences(prices: Sequence[float], target: float) -> int:
    """Count samples exactly equal to ``target``.

    The comparison is exact ``==`` on floats, so a value recomputed through
    different arithmetic may not match.
    """
    return sum(1 for price in prices if price == target)


def cumulative_sum(prices: Sequence[float]) -> list[float]:
    """Running prefix sums: element ``i`` is the sum of ``prices[0..i]``."""
    return list(itertools.accumulate(prices))


@dataclass(frozen=True)
class StockSummary:
    average: float
    maximum: float
    target: float
    occurrences: int
    cumulative: list[float]


def summarize(prices: Sequence[float], target: float) -> StockSummary:
    return StockSummary(
        average=average_price(prices),
        maximum=maximum_price(prices),
        target=target,
        occurrences=count_occurrences(prices, target),
        cumulative=cumulative_sum(prices),
    )


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def run_stock_report(prices: Sequence[float], target: float, console: Console) -> StockSummary:
    """Compute and print the statistics for ``prices``."""
    summary = summarize(prices, target)
    console.print(f"Average Stock Price: {_fmt(summary.average)}")
    console.print(f"Maximum Stock Price: {_fmt(summary.maximum)}")
    console.print(f"Occurrences of {_fmt(summary.target)}: {summary.occurrences}")
    cumulative = ", ".join(_fmt(value) for value in summary.cumulative)
    console.print(f"Cumulative Sum of Stock Prices: [{cumulative}]", markup=False)
    return summary
