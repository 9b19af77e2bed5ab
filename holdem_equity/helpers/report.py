from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .evaluator import HandCategory
from .stats import category_table, order_by_wins, tie_percentage, win_percentage

if TYPE_CHECKING:
    from ..engine.aggregator import EquityResult


# -----------------------------
# Pretty formatting helpers
# -----------------------------
def _fmt_hand(result: "EquityResult", seat: int) -> str:
    return "".join(str(c) for c in result.hands[seat].cards())


def _fmt_pct(x: float) -> str:
    return f"{x:.1f}%"


def _fmt_category_pct(x: float) -> str:
    if math.isnan(x) or x == 0.0:
        return "."
    if x < 0.1:
        return "<0.1%"
    return _fmt_pct(x)


def _table(rows: List[List[str]]) -> List[str]:
    widths = [max(len(r[i]) for r in rows) for i in range(len(rows[0]))]
    return ["  ".join(cell.rjust(w) if j else cell.ljust(w) for j, (cell, w) in enumerate(zip(r, widths))) for r in rows]


def format_report(result: "EquityResult", elapsed: Optional[float] = None) -> str:
    """
    Plain-text equity tables: win/tie per hand (most wins first), then the
    made-hand distribution of each hand's wins and ties.
    """
    order = order_by_wins(result)
    lines: List[str] = []
    if result.board:
        lines.append(f"board: {' '.join(str(c) for c in result.board.cards())}")
        lines.append("")

    rows = [["hand", "win", "tie"]]
    for s in order:
        rec = result[s]
        rows.append([
            _fmt_hand(result, s),
            _fmt_pct(win_percentage(rec, result.total)),
            _fmt_pct(tie_percentage(rec, result.total)),
        ])
    lines.extend(_table(rows))
    lines.append("")

    table = category_table(result)
    rows = [[""] + [_fmt_hand(result, s) for s in order]]
    for cat in HandCategory:
        rows.append([cat.label] + [_fmt_category_pct(float(table[int(cat), s])) for s in order])
    lines.extend(_table(rows))
    lines.append("")

    footer = f"{result.total} combinations calculated"
    if elapsed is not None:
        footer += f" in {elapsed:.3f}s"
    lines.append(footer)
    return "\n".join(lines)


def result_to_dict(result: "EquityResult") -> Dict[str, Any]:
    """JSON-ready view of a result; undefined percentages become None."""
    def _num(x: float) -> Optional[float]:
        return None if math.isnan(x) else round(x, 4)

    table = category_table(result)
    players = []
    for rec in result.records:
        players.append({
            "seat": rec.seat,
            "hand": _fmt_hand(result, rec.seat),
            "wins": rec.wins,
            "ties": rec.ties,
            "win_pct": _num(win_percentage(rec, result.total)),
            "tie_pct": _num(tie_percentage(rec, result.total)),
            "categories": {cat.name.lower(): rec.category_count(cat) for cat in HandCategory},
            "category_pct": {cat.name.lower(): _num(float(table[int(cat), rec.seat])) for cat in HandCategory},
        })
    return {
        "board": str(result.board),
        "total": result.total,
        "players": players,
    }
