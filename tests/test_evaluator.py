import pytest

from holdem_equity.helpers.cardset import CardSet
from holdem_equity.helpers.evaluator import HandCategory, evaluate_best, winners

def test_royal_flush_beats_broadway_straight():
    board = ["Qs","Js","Ts","2d","3c"]
    hero = ["As","Ks"]      # royal
    vill = ["Ah","Kh"]      # just broadway straight (not flush)
    assert winners([hero, vill], board) == [(0, HandCategory.ROYAL_FLUSH)]

def test_pair_vs_high_card():
    board = ["2s","7d","Jh","4c","9c"]
    hero = ["Jc","3d"]      # pair of J
    vill = ["Ah","Kd"]      # high card
    assert winners([hero, vill], board) == [(0, HandCategory.PAIR)]

def test_evaluate_best_returns_expected_shape():
    cat, tb, best5 = evaluate_best(["Ah","Ad"], ["7c","8d","9s"])
    assert cat == HandCategory.PAIR
    assert isinstance(tb, tuple)
    assert len(best5) == 5

def test_royal_flush_is_its_own_tier():
    cat, tb, _ = evaluate_best(["As","Ks"], ["Qs","Js","Ts","2d","3c"])
    assert cat == HandCategory.ROYAL_FLUSH
    cat, tb, _ = evaluate_best(["9s","8s"], ["7s","6s","5s","2d","3c"])
    assert cat == HandCategory.STRAIGHT_FLUSH
    assert tb == (9,)

def test_wheel_is_five_high():
    cat, tb, _ = evaluate_best(["Ah","2d"], ["3c","4s","5h","Kd","Kc"])
    assert cat == HandCategory.STRAIGHT
    assert tb == (5,)

def test_accepts_cardsets():
    cat, _, _ = evaluate_best(CardSet.from_str("KsKd"), CardSet.from_str("Kh2c7d"))
    assert cat == HandCategory.TRIPS

def test_winners_reports_ties_with_category():
    hands = [CardSet.from_str("2c3d"), CardSet.from_str("4h5h")]
    board = CardSet.from_str("AsKhQdJcTh")
    assert winners(hands, board) == [(0, HandCategory.STRAIGHT), (1, HandCategory.STRAIGHT)]

def test_winners_needs_hands():
    with pytest.raises(ValueError):
        winners([], CardSet.from_str("AsKhQdJcTh"))

def test_duplicate_cards_rejected():
    with pytest.raises(ValueError):
        evaluate_best(["Ah","Kd"], ["Ah","7c","8d"])
