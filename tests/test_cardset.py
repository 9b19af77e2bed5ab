import pytest

from holdem_equity.helpers.cards import card_to_id
from holdem_equity.helpers.cardset import CardSet, EMPTY, FULL_DECK, join


def test_empty_and_full():
    assert EMPTY.count() == 0
    assert not EMPTY
    assert FULL_DECK.count() == 52
    assert FULL_DECK.contains(0) and FULL_DECK.contains(51)

def test_toggle_is_pure():
    a = CardSet.from_str("AhKd")
    b = a.toggle(card_to_id("2c"))
    assert a.count() == 2
    assert b.count() == 3
    assert b.contains(card_to_id("2c"))
    assert b.toggle(card_to_id("2c")) == a

def test_toggle_removes_member():
    a = CardSet.from_str("AhKd")
    b = a.toggle(card_to_id("Ah"))
    assert str(b) == "Kd"

def test_union_difference():
    a = CardSet.from_str("AhKd")
    b = CardSet.from_str("Kd 2c")
    assert str(a | b) == "2c Kd Ah"
    assert str(a - b) == "Ah"
    assert a.union(b) == a | b
    assert a.difference(b) == a - b
    assert not a.isdisjoint(b)
    assert a.isdisjoint(CardSet.from_str("2c"))

def test_join_many():
    s = join(CardSet.from_str("AhAd"), CardSet.from_str("KsKd"), CardSet.from_str("2c"))
    assert s.count() == 5
    assert join() == EMPTY

def test_views_are_ordered_by_position():
    s = CardSet.from_cards(["Ac", "2s", "Td"])
    assert s.positions() == sorted(s.positions())
    assert [str(c) for c in s] == ["2s", "Td", "Ac"]
    assert len(s) == 3

def test_from_cards_accepts_positions():
    assert CardSet.from_cards([0, 51]) == CardSet.from_str("2sAc")

def test_out_of_universe_rejected():
    with pytest.raises(ValueError):
        CardSet(1 << 52)
    with pytest.raises(ValueError):
        EMPTY.toggle(52)
    with pytest.raises(ValueError):
        EMPTY.contains(-1)
    with pytest.raises(ValueError):
        CardSet.from_str("AhK")
