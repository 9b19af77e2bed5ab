# cards
from .cards import Card, parse_cards, card_to_id, id_to_card, NUM_CARDS, HAND_SIZE, BOARD_SIZE
from .cardset import CardSet, EMPTY, FULL_DECK, join

# evaluation
from .evaluator import HandCategory, evaluate_best, winners

# input notation
from .parsing import parse_hands, parse_board, check_duplicates, parse_inputs

# derived stats + presentation
from .stats import win_percentage, tie_percentage, category_percentage, category_table, order_by_wins
from .report import format_report, result_to_dict

__all__ = [
    # cards
    "Card", "parse_cards", "card_to_id", "id_to_card",
    "NUM_CARDS", "HAND_SIZE", "BOARD_SIZE",
    "CardSet", "EMPTY", "FULL_DECK", "join",

    # evaluation
    "HandCategory", "evaluate_best", "winners",

    # parsing
    "parse_hands", "parse_board", "check_duplicates", "parse_inputs",

    # stats / report
    "win_percentage", "tie_percentage", "category_percentage", "category_table", "order_by_wins",
    "format_report", "result_to_dict",
]
