"""Guess validation and ladder search for weaver."""

from .validate import validate, score, check_in_dictionary, check_length, ValidatorConfig
from .validate import CONTINUE_MESSAGE, WIN_MESSAGE
from .models import LetterState, ValidationResult
from .pathfinder import find_shortest_path, differs_by_one_letter, score_path
from .data import Dictionary, load_dictionary, wildcard_patterns, build_pattern_index
from .errors import (
    WeaverError,
    InvalidWordError,
    DictionaryError,
    LengthError,
    LadderRuleError,
    WordGenerationError,
    DictionaryLoadError,
    GameNotStartedError,
    InvalidArgumentError,
)

__all__ = [
    # Validation
    "validate",
    "score",
    "check_in_dictionary",
    "check_length",
    "ValidatorConfig",
    "CONTINUE_MESSAGE",
    "WIN_MESSAGE",
    # Models
    "LetterState",
    "ValidationResult",
    # Ladder search
    "find_shortest_path",
    "differs_by_one_letter",
    "score_path",
    # Dictionary
    "Dictionary",
    "load_dictionary",
    "wildcard_patterns",
    "build_pattern_index",
    # Errors
    "WeaverError",
    "InvalidWordError",
    "DictionaryError",
    "LengthError",
    "LadderRuleError",
    "WordGenerationError",
    "DictionaryLoadError",
    "GameNotStartedError",
    "InvalidArgumentError",
]
