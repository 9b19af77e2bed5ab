from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Union

RANKS = "23456789TJQKA"
SUITS = "shdc"
RANK_TO_VAL = {r: i + 2 for i, r in enumerate(RANKS)}  # 2..14
VAL_TO_RANK = {v: r for r, v in RANK_TO_VAL.items()}

NUM_CARDS = len(RANKS) * len(SUITS)
HAND_SIZE = 2
BOARD_SIZE = 5


@dataclass(frozen=True, order=True)
class Card:
    val: int
    suit: str

    def __str__(self) -> str:
        return f"{VAL_TO_RANK[self.val]}{self.suit}"

    @staticmethod
    def from_str(s: str) -> "Card":
        s = s.strip()
        if len(s) != 2:
            raise ValueError(f"Bad card string: {s!r}")
        r, su = s[0].upper(), s[1].lower()
        if r not in RANK_TO_VAL or su not in SUITS:
            raise ValueError(f"Bad card string: {s!r}")
        return Card(RANK_TO_VAL[r], su)


# ------------------------------------------------------------
# Card positions: 0..51 (rank-major, suit-minor)
# rank 2..A => 0..12, suit s/h/d/c => 0..3
# ------------------------------------------------------------

_SUIT_TO_I = {s: i for i, s in enumerate(SUITS)}


def card_to_id(c: Union[str, Card]) -> int:
    c = c if isinstance(c, Card) else Card.from_str(c)
    return (c.val - 2) * len(SUITS) + _SUIT_TO_I[c.suit]


def id_to_card(cid: int) -> Card:
    if not (0 <= cid < NUM_CARDS):
        raise ValueError(f"Card id out of range: {cid}")
    r_i, s_i = divmod(cid, len(SUITS))
    return Card(r_i + 2, SUITS[s_i])


def parse_cards(cards: Iterable[Union[str, Card]]) -> List[Card]:
    out: List[Card] = []
    for x in cards:
        out.append(x if isinstance(x, Card) else Card.from_str(x))
    return out

