from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence

from ..helpers.cardset import CardSet
from ..helpers.evaluator import HandCategory, winners as best_hands


class OracleContractError(RuntimeError):
    """The hand oracle returned something the aggregator cannot account for."""


@dataclass(frozen=True, slots=True)
class WinnerEntry:
    seat: int                 # index of the hand in the input order
    category: HandCategory    # made hand the seat won or tied with


class HandOracle(ABC):
    """
    Ranks every hand against a complete board and names the winner(s).

    One entry means a sole winner; several entries mean those seats tie.
    The list must never be empty.
    """

    @abstractmethod
    def winners(self, board: CardSet, hands: Sequence[CardSet]) -> List[WinnerEntry]:
        raise NotImplementedError


class EvaluatorOracle(HandOracle):
    """Oracle backed by the brute-force best-of-21 evaluator."""

    def winners(self, board: CardSet, hands: Sequence[CardSet]) -> List[WinnerEntry]:
        return [WinnerEntry(seat, category) for seat, category in best_hands(hands, board)]
