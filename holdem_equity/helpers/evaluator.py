from __future__ import annotations
from enum import IntEnum
from itertools import combinations
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from .cards import Card, parse_cards
from .cardset import CardSet


class HandCategory(IntEnum):
    """Made-hand categories, weakest to strongest."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    TRIPS = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    QUADS = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")


HandKey = Tuple[HandCategory, Tuple[int, ...]]
CardsLike = Union[CardSet, Iterable[Union[str, Card]]]


def _as_cards(cards: CardsLike) -> List[Card]:
    if isinstance(cards, CardSet):
        return cards.cards()
    return parse_cards(cards)


def _rank_counts(cards: Sequence[Card]) -> Dict[int, int]:
    d: Dict[int, int] = {}
    for c in cards:
        d[c.val] = d.get(c.val, 0) + 1
    return d


def straight_high(values: Iterable[int]) -> Optional[int]:
    uniq = sorted(set(values), reverse=True)
    if 14 in uniq:
        uniq.append(1)  # ace low
    run = 1
    best = None
    for i in range(len(uniq) - 1):
        if uniq[i] - 1 == uniq[i + 1]:
            run += 1
            if run >= 5:
                high = uniq[i - (run - 2)]
                best = max(best or 0, high)
        else:
            run = 1
    if best == 1:
        return 5
    return best


def evaluate_5(cards5: Sequence[Card]) -> HandKey:
    if len(cards5) != 5:
        raise ValueError("evaluate_5 expects exactly 5 cards")

    vals = sorted([c.val for c in cards5], reverse=True)
    is_flush = len({c.suit for c in cards5}) == 1

    counts = _rank_counts(cards5)
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    count_pattern = sorted(counts.values(), reverse=True)

    sh = straight_high(vals)

    if sh is not None and is_flush:
        if sh == 14:
            return HandCategory.ROYAL_FLUSH, (sh,)
        return HandCategory.STRAIGHT_FLUSH, (sh,)
    if count_pattern == [4, 1]:
        quad = groups[0][0]
        kicker = max(v for v in vals if v != quad)
        return HandCategory.QUADS, (quad, kicker)
    if count_pattern == [3, 2]:
        return HandCategory.FULL_HOUSE, (groups[0][0], groups[1][0])
    if is_flush:
        return HandCategory.FLUSH, tuple(vals)
    if sh is not None:
        return HandCategory.STRAIGHT, (sh,)
    if count_pattern == [3, 1, 1]:
        trips = groups[0][0]
        return HandCategory.TRIPS, (trips, *[v for v in vals if v != trips])
    if count_pattern == [2, 2, 1]:
        pair_hi, pair_lo = groups[0][0], groups[1][0]
        kicker = max(v for v in vals if v != pair_hi and v != pair_lo)
        return HandCategory.TWO_PAIR, (pair_hi, pair_lo, kicker)
    if count_pattern == [2, 1, 1, 1]:
        pair = groups[0][0]
        return HandCategory.PAIR, (pair, *[v for v in vals if v != pair])
    return HandCategory.HIGH_CARD, tuple(vals)


def evaluate_best(hand: CardsLike, board: CardsLike) -> Tuple[HandCategory, Tuple[int, ...], List[Card]]:
    """
    Best 5-card hand out of 2 hole cards plus a 3..5 card board.
    Returns (category, tiebreak, best5) with best5 sorted high to low.
    """
    h = _as_cards(hand)
    b = _as_cards(board)
    cards = h + b
    if len(h) != 2:
        raise ValueError("Hold'em hand must be exactly 2 cards")
    if not (3 <= len(b) <= 5):
        raise ValueError("Board must be 3, 4, or 5 cards post-flop")
    if len(set(cards)) != len(cards):
        raise ValueError("Duplicate cards detected")

    best: Optional[Tuple[HandKey, Tuple[Card, ...]]] = None
    for combo in combinations(cards, 5):
        key = evaluate_5(combo)
        if best is None or key > best[0]:
            best = (key, combo)

    assert best is not None
    (category, tiebreak), combo = best
    return category, tiebreak, sorted(combo, key=lambda c: c.val, reverse=True)


def winners(hands: Sequence[CardsLike], board: CardsLike) -> List[Tuple[int, HandCategory]]:
    """Seats (index into hands) holding the best hand, with their category."""
    if not hands:
        raise ValueError("At least one hand is needed")
    keys = []
    for i, h in enumerate(hands):
        category, tiebreak, _ = evaluate_best(h, board)
        keys.append((category, tiebreak, i))
    bc, bt, _ = max(keys, key=lambda x: (x[0], x[1]))
    return [(i, c) for (c, tb, i) in keys if (c, tb) == (bc, bt)]
