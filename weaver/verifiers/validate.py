"""
Guess validation for the word-ladder game.

Validates:
1. Dictionary membership of the target and the guess (strict mode)
2. Guess length matches the target length
3. Letter feedback, Wordle style: exact matches first, then misplaced
   letters up to the number of copies left in the target
"""

from collections import Counter
from typing import Dict, Iterable, Optional
from pydantic import BaseModel

from .errors import DictionaryError, LengthError
from .models import LetterState, ValidationResult


CONTINUE_MESSAGE = "Continue"
WIN_MESSAGE = "You win the game!"


class ValidatorConfig(BaseModel):
    """Options selecting the validator variant."""
    show_messages: bool = False  # annotate results with Continue / win text
    strict: bool = True  # require both words to be dictionary members


def check_in_dictionary(word: str, dictionary: Iterable[str]) -> None:
    """Raise DictionaryError if `word` is not a dictionary member."""
    if word not in dictionary:
        raise DictionaryError("This word is not in the dictionary.")


def check_length(word: str, target: str) -> None:
    """Raise LengthError if `word` and `target` differ in length."""
    if len(word) != len(target):
        raise LengthError("Length of word is not equal to target word.")


def score(guess: str, target: str) -> Dict[int, LetterState]:
    """Score `guess` against `target` position by position. Lengths must match."""
    states: Dict[int, LetterState] = {}
    available = Counter(target)

    # Pass 1 - exact matches consume their letters first
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            states[i] = LetterState.CORRECT_POSITION
            available[g] -= 1

    # Pass 2 - misplaced letters, bounded by what is left
    for i, g in enumerate(guess):
        if i in states:
            continue
        if available[g] > 0:
            states[i] = LetterState.WRONG_POSITION
            available[g] -= 1
        else:
            states[i] = LetterState.NOT_IN_WORD

    return dict(sorted(states.items()))


def validate(
    guess: str,
    target: str,
    dictionary: Iterable[str],
    config: Optional[ValidatorConfig] = None,
) -> ValidationResult:
    """
    Validate a guess against the target word.

    Returns a ValidationResult with:
    - states: one LetterState per position of the guess
    - message: "Continue" / "You win the game!" when config.show_messages,
      otherwise None

    Raises DictionaryError or LengthError before any scoring happens.
    """
    if config is None:
        config = ValidatorConfig()

    guess = guess.upper()
    target = target.upper()

    if config.strict:
        check_in_dictionary(target, dictionary)
        check_in_dictionary(guess, dictionary)
    check_length(guess, target)

    result = ValidationResult(states=tuple(score(guess, target).values()))

    if config.show_messages:
        return result.with_message(WIN_MESSAGE if result.is_win else CONTINUE_MESSAGE)
    return result
