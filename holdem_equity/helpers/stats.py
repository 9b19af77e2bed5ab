from __future__ import annotations

import math
from typing import TYPE_CHECKING, List

import numpy as np

from .evaluator import HandCategory

if TYPE_CHECKING:
    from ..engine.aggregator import EquityResult, PlayerEquity


def _pct(n: int, total: int) -> float:
    # undefined: NaN, never 0
    if total == 0:
        return math.nan
    return n / total * 100


def win_percentage(rec: "PlayerEquity", total: int) -> float:
    return _pct(rec.wins, total)


def tie_percentage(rec: "PlayerEquity", total: int) -> float:
    return _pct(rec.ties, total)


def category_percentage(rec: "PlayerEquity", category: HandCategory) -> float:
    """Share of this seat's wins+ties made with `category`."""
    return _pct(rec.category_count(category), rec.showdowns_won)


def category_table(result: "EquityResult") -> np.ndarray:
    """
    (n_categories, n_players) array of category percentages.
    Columns for seats that never won or tied are all NaN.
    """
    counts = np.zeros((len(HandCategory), len(result)), dtype=np.float64)
    for rec in result.records:
        for cat, n in rec.categories:
            counts[int(cat), rec.seat] = n
    denom = np.array([rec.showdowns_won for rec in result.records], dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore"):
        table = counts / denom * 100.0
    table[:, denom == 0] = np.nan
    return table


def order_by_wins(result: "EquityResult") -> List[int]:
    return sorted(range(len(result)), key=lambda s: result[s].wins, reverse=True)
