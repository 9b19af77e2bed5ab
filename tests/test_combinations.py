import math

import pytest

from holdem_equity.helpers.cardset import CardSet, EMPTY, join
from holdem_equity.engine.combinations import count_completions, iter_completions, missing_cards

AA = CardSet.from_str("AhAd")
KK = CardSet.from_str("KsKd")


def test_full_board_yields_itself_once():
    board = CardSet.from_str("2c7d9hTsJc")
    out = list(iter_completions([AA, KK], board))
    assert out == [board]
    assert count_completions([AA, KK], board) == 1

def test_river_missing_gives_every_remaining_card():
    board = CardSet.from_str("2c7d9hTs")
    out = list(iter_completions([AA, KK], board))
    assert len(out) == 44
    dealt = join(*out) - board
    assert dealt.isdisjoint(AA | KK)
    assert dealt.count() == 44

def test_flop_completions_unique_and_valid():
    board = CardSet.from_str("2c7d9h")
    out = list(iter_completions([AA, KK], board))
    assert len(out) == math.comb(45, 2) == count_completions([AA, KK], board)
    assert len({c.mask for c in out}) == len(out)
    for c in out:
        assert c.count() == 5
        assert (c - board).count() == 2
        assert board.isdisjoint(c - board)
        assert c.isdisjoint(AA | KK)

def test_lexicographic_position_order():
    out = list(iter_completions([], EMPTY, board_size=1))
    assert [c.positions()[0] for c in out] == list(range(52))
    pairs = [tuple(c.positions()) for c in iter_completions([], EMPTY, board_size=2)]
    assert pairs == sorted(pairs)
    assert all(a < b for a, b in pairs)

def test_deterministic_rerun():
    board = CardSet.from_str("2c7d9h")
    assert list(iter_completions([AA, KK], board)) == list(iter_completions([AA, KK], board))

def test_not_enough_cards_yields_nothing():
    hands = [CardSet.from_cards([2 * i, 2 * i + 1]) for i in range(24)]   # 48 cards dealt
    assert list(iter_completions(hands, EMPTY)) == []
    assert count_completions(hands, EMPTY) == 0

def test_board_too_large_rejected_before_enumeration():
    board = CardSet.from_str("2c7d9hTsJc")
    with pytest.raises(ValueError):
        iter_completions([AA], board, board_size=4)
    with pytest.raises(ValueError):
        missing_cards(board, 3)

def test_custom_board_size():
    board = CardSet.from_str("2c7d9h")
    assert len(list(iter_completions([AA, KK], board, board_size=3))) == 1
    assert len(list(iter_completions([AA, KK], board, board_size=4))) == 45

@pytest.mark.slow
def test_preflop_heads_up_count():
    n = sum(1 for _ in iter_completions([AA, KK], EMPTY))
    assert n == math.comb(48, 5) == 1_712_304
