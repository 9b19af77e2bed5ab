from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from ..helpers.cards import BOARD_SIZE, HAND_SIZE
from ..helpers.cardset import EMPTY, CardSet
from ..helpers.evaluator import HandCategory
from .combinations import count_completions, iter_completions, missing_cards
from .oracle import EvaluatorOracle, HandOracle, OracleContractError, WinnerEntry
from .pipeline import CompletionStream

log = logging.getLogger(__name__)


@dataclass(slots=True)
class EquityRecord:
    """Running totals for one seat. Only the aggregator writes to it."""
    wins: int = 0
    ties: int = 0
    categories: Dict[HandCategory, int] = field(default_factory=dict)

    def freeze(self, seat: int) -> "PlayerEquity":
        cats = tuple(sorted(self.categories.items()))
        return PlayerEquity(seat=seat, wins=self.wins, ties=self.ties, categories=cats)


@dataclass(frozen=True, slots=True)
class PlayerEquity:
    seat: int
    wins: int
    ties: int
    categories: Tuple[Tuple[HandCategory, int], ...] = ()

    def category_count(self, category: HandCategory) -> int:
        for c, n in self.categories:
            if c == category:
                return n
        return 0

    @property
    def showdowns_won(self) -> int:
        return self.wins + self.ties


@dataclass(frozen=True, slots=True)
class EquityResult:
    total: int
    records: Tuple[PlayerEquity, ...]
    hands: Tuple[CardSet, ...]
    board: CardSet = EMPTY

    def __getitem__(self, seat: int) -> PlayerEquity:
        return self.records[seat]

    def __len__(self) -> int:
        return len(self.records)


class EquityAggregator:
    """
    Folds oracle decisions into per-seat win/tie/category counters.

    Seats are dense indices 0..n_players-1 matching the order of the hands
    handed to the oracle.
    """

    def __init__(self, n_players: int):
        if n_players <= 0:
            raise ValueError("n_players must be positive")
        self.records: List[EquityRecord] = [EquityRecord() for _ in range(n_players)]
        self.total = 0

    def add(self, winners: Sequence[WinnerEntry]) -> None:
        if not winners:
            raise OracleContractError("oracle returned no winner")
        seats = [w.seat for w in winners]
        if len(set(seats)) != len(seats):
            raise OracleContractError(f"oracle named a seat more than once: {seats}")
        for s in seats:
            if not (0 <= s < len(self.records)):
                raise OracleContractError(f"oracle named unknown seat {s}")

        sole_winner = len(seats) == 1
        for w in winners:
            rec = self.records[w.seat]
            rec.categories[w.category] = rec.categories.get(w.category, 0) + 1
            if sole_winner:
                rec.wins += 1
            else:
                rec.ties += 1

        self.total += 1

    def snapshot(self, hands: Sequence[CardSet], board: CardSet = EMPTY) -> EquityResult:
        return EquityResult(
            total=self.total,
            records=tuple(rec.freeze(seat) for seat, rec in enumerate(self.records)),
            hands=tuple(hands),
            board=board,
        )


def validate_inputs(hands: Sequence[CardSet], board: CardSet, board_size: int = BOARD_SIZE) -> None:
    if not hands:
        raise ValueError("At least one hand is needed")
    seen = EMPTY
    for i, h in enumerate(hands):
        if h.count() != HAND_SIZE:
            raise ValueError(f"Hand {i} must be exactly {HAND_SIZE} cards, got {h.count()}")
        if not h.isdisjoint(seen):
            raise ValueError(f"Hand {i} ({h}) shares cards with another hand")
        seen = seen | h
    if not board.isdisjoint(seen):
        raise ValueError(f"Board {board} shares cards with a hand")
    missing_cards(board, board_size)


def calculate_equities(
    hands: Sequence[CardSet],
    board: CardSet = EMPTY,
    oracle: Optional[HandOracle] = None,
    *,
    board_size: int = BOARD_SIZE,
    threaded: bool = True,
) -> EquityResult:
    """
    Exact equity by full enumeration of the missing board cards.

    Every completion goes to `oracle` (EvaluatorOracle by default) and the
    decision is folded into an EquityAggregator. With threaded=True the
    completions are produced on a separate thread behind a one-slot queue;
    otherwise the generator is consumed in the calling thread.
    """
    hands = tuple(hands)
    validate_inputs(hands, board, board_size)
    if oracle is None:
        oracle = EvaluatorOracle()

    log.info(
        "calculating equities: %d hand(s), board=[%s], %d completion(s) expected",
        len(hands), board, count_completions(hands, board, board_size),
    )
    start = time.perf_counter()

    agg = EquityAggregator(len(hands))
    source = iter_completions(hands, board, board_size)
    if threaded:
        with CompletionStream(source) as stream:
            for completion in stream:
                agg.add(oracle.winners(completion, hands))
    else:
        for completion in source:
            agg.add(oracle.winners(completion, hands))

    log.info("%d combinations calculated in %.3fs", agg.total, time.perf_counter() - start)
    return agg.snapshot(hands, board)
