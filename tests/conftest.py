from typing import Callable, List, Sequence

import pytest

from holdem_equity.engine.oracle import HandOracle, WinnerEntry
from holdem_equity.helpers.cardset import CardSet
from holdem_equity.helpers.evaluator import HandCategory


class ScriptedOracle(HandOracle):
    """Test double: decides winners with a plain function of the board."""

    def __init__(self, script: Callable[[CardSet, Sequence[CardSet]], List[WinnerEntry]]):
        self.script = script
        self.calls = 0

    def winners(self, board, hands):
        self.calls += 1
        return self.script(board, hands)


def mod3_script(board, hands):
    # seat 0, seat 1, or a two-way tie, keyed off the board mask
    r = board.mask % 3
    cat = HandCategory(board.mask % len(HandCategory))
    if r == 2:
        return [WinnerEntry(0, cat), WinnerEntry(1, cat)]
    return [WinnerEntry(r, cat)]


@pytest.fixture
def mod3_oracle():
    return ScriptedOracle(mod3_script)


@pytest.fixture
def scripted():
    return ScriptedOracle
