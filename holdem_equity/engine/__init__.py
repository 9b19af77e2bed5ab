from .combinations import iter_completions, count_completions, missing_cards
from .oracle import HandOracle, EvaluatorOracle, WinnerEntry, OracleContractError
from .pipeline import CompletionStream
from .aggregator import (
    EquityAggregator,
    EquityRecord,
    EquityResult,
    PlayerEquity,
    calculate_equities,
    validate_inputs,
)

__all__ = [
    "iter_completions",
    "count_completions",
    "missing_cards",
    "HandOracle",
    "EvaluatorOracle",
    "WinnerEntry",
    "OracleContractError",
    "CompletionStream",
    "EquityAggregator",
    "EquityRecord",
    "EquityResult",
    "PlayerEquity",
    "calculate_equities",
    "validate_inputs",
]
