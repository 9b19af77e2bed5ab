from __future__ import annotations

import logging
import math
from typing import Iterator, Sequence

from ..helpers.cards import BOARD_SIZE, NUM_CARDS
from ..helpers.cardset import EMPTY, CardSet, join

log = logging.getLogger(__name__)


def missing_cards(board: CardSet, board_size: int = BOARD_SIZE) -> int:
    k = board_size - board.count()
    if k < 0:
        raise ValueError(f"Board has {board.count()} cards, more than board_size={board_size}")
    return k


def count_completions(hands: Sequence[CardSet], board: CardSet = EMPTY, board_size: int = BOARD_SIZE) -> int:
    """C(u, k): u undealt cards, k open board slots."""
    k = missing_cards(board, board_size)
    u = NUM_CARDS - join(*hands, board).count()
    return math.comb(u, k)


def iter_completions(
    hands: Sequence[CardSet],
    board: CardSet = EMPTY,
    board_size: int = BOARD_SIZE,
) -> Iterator[CardSet]:
    """
    Yields every full board reachable from `board` using cards that are in
    neither the hands nor the board, each exactly once.

    Picks are made in strictly increasing card position, so a combination is
    only ever built in one order. A full board yields itself once; a deck too
    small to fill the open slots yields nothing.
    """
    used = join(*hands, board)
    k = missing_cards(board, board_size)
    log.debug("enumerating %d open board slot(s) from %d undealt cards", k, NUM_CARDS - used.count())

    def search(picked: CardSet, start: int, n: int) -> Iterator[CardSet]:
        if n == 0:
            yield picked | board
            return
        for pos in range(start, NUM_CARDS):
            if used.contains(pos):
                continue
            picked = picked.toggle(pos)
            yield from search(picked, pos + 1, n - 1)
            picked = picked.toggle(pos)

    return search(EMPTY, 0, k)
