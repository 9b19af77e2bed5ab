from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Union

from .cards import NUM_CARDS, Card, card_to_id, id_to_card

CardLike = Union[str, Card, int]

_FULL_MASK = (1 << NUM_CARDS) - 1


def _check_position(pos: int) -> int:
    if not (0 <= pos < NUM_CARDS):
        raise ValueError(f"Card position out of range: {pos}")
    return pos


def _to_position(c: CardLike) -> int:
    if isinstance(c, int):
        return _check_position(c)
    return card_to_id(c)


@dataclass(frozen=True, slots=True)
class CardSet:
    """
    Immutable set of cards stored as a bitmask over the 52 card positions.
    Bit i is set iff the card with position i (see card_to_id) is a member.

    Every operation returns a new CardSet, so a set held by one caller is
    never changed by another.
    """
    mask: int = 0

    def __post_init__(self) -> None:
        if self.mask < 0 or self.mask & ~_FULL_MASK:
            raise ValueError(f"CardSet mask outside the {NUM_CARDS}-card universe: {self.mask:#x}")

    # ---- construction ----

    @staticmethod
    def from_cards(cards: Iterable[CardLike]) -> "CardSet":
        mask = 0
        for c in cards:
            mask |= 1 << _to_position(c)
        return CardSet(mask)

    @staticmethod
    def from_str(s: str) -> "CardSet":
        """Parses compact ("AhKd") or spaced ("Ah Kd") notation."""
        s = "".join(s.split())
        if len(s) % 2:
            raise ValueError(f"Bad card string: {s!r}")
        return CardSet.from_cards(s[i:i + 2] for i in range(0, len(s), 2))

    # ---- core operations ----

    def contains(self, pos: int) -> bool:
        return (self.mask >> _check_position(pos)) & 1 == 1

    def toggle(self, pos: int) -> "CardSet":
        return CardSet(self.mask ^ (1 << _check_position(pos)))

    def union(self, other: "CardSet") -> "CardSet":
        return CardSet(self.mask | other.mask)

    def difference(self, other: "CardSet") -> "CardSet":
        return CardSet(self.mask & ~other.mask)

    def isdisjoint(self, other: "CardSet") -> bool:
        return self.mask & other.mask == 0

    def count(self) -> int:
        return self.mask.bit_count()

    __or__ = union
    __sub__ = difference

    # ---- views ----

    def positions(self) -> List[int]:
        return [i for i in range(NUM_CARDS) if (self.mask >> i) & 1]

    def cards(self) -> List[Card]:
        return [id_to_card(i) for i in self.positions()]

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards())

    def __len__(self) -> int:
        return self.count()

    def __bool__(self) -> bool:
        return self.mask != 0

    def __str__(self) -> str:
        return " ".join(str(c) for c in self.cards())


EMPTY = CardSet()
FULL_DECK = CardSet(_FULL_MASK)


def join(*sets: CardSet) -> CardSet:
    mask = 0
    for s in sets:
        mask |= s.mask
    return CardSet(mask)
