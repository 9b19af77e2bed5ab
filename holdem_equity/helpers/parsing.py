from __future__ import annotations
from typing import List, Sequence, Tuple, Union

from .cards import BOARD_SIZE, HAND_SIZE, Card
from .cardset import EMPTY, CardSet


def _parse_card(token: str, context: str) -> Card:
    try:
        return Card.from_str(token)
    except ValueError:
        raise ValueError(f"{token} card ({context}) is not valid") from None


def parse_hands(hands: Union[str, Sequence[str]]) -> List[CardSet]:
    """
    "AhAd KsKd" (or ["AhAd", "KsKd"], or ["AhAd KsKd"]) -> one CardSet per
    hand, in input order.
    """
    tokens = [t for h in ([hands] if isinstance(hands, str) else hands) for t in h.split()]
    if not tokens:
        raise ValueError("at least one hand is needed")

    out: List[CardSet] = []
    for tok in tokens:
        if len(tok) != 2 * HAND_SIZE:
            raise ValueError(f"{tok} hand is not valid, hands must have 2 cards with a valid suit")
        c1 = _parse_card(tok[:2], f"{tok} hand")
        c2 = _parse_card(tok[2:], f"{tok} hand")
        if c1 == c2:
            raise ValueError(f"card {c1} is duplicated")
        out.append(CardSet.from_cards([c1, c2]))
    return out


def parse_board(board: str) -> CardSet:
    """ "2c3d4h" or "2c 3d 4h" -> board CardSet (may be empty). """
    s = "".join(board.split())
    if len(s) > 2 * BOARD_SIZE:
        raise ValueError(f"maximum cards in board are {BOARD_SIZE}")

    cards: List[Card] = []
    for i in range(0, len(s), 2):
        c = _parse_card(s[i:i + 2], f"{s} board")
        if c in cards:
            raise ValueError(f"card {c} is duplicated")
        cards.append(c)
    return CardSet.from_cards(cards)


def check_duplicates(hands: Sequence[CardSet], board: CardSet = EMPTY) -> None:
    seen = CardSet()
    for cs in [*hands, board]:
        overlap = seen.mask & cs.mask
        if overlap:
            first = CardSet(overlap & -overlap)
            raise ValueError(f"card {first} is duplicated")
        seen = seen | cs


def parse_inputs(hands: Union[str, Sequence[str]], board: str = "") -> Tuple[List[CardSet], CardSet]:
    hs = parse_hands(hands)
    bd = parse_board(board)
    check_duplicates(hs, bd)
    return hs, bd
