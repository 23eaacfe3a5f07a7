"""
Pydantic models for the environment layer.

This module contains the configuration, session snapshot and notification
models used by the game engine. The engine and the word generation
strategies live in their own files.
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict

from ..verifiers.models import ValidationResult


# Type aliases
StrategyKind = Literal["FIXED", "RANDOM", "RANDOM_WITH_PATH"]


class GameConfig(BaseModel):
    """Configuration for a game engine."""
    word_length: int = Field(default=4, ge=1)
    dictionary_path: Optional[str] = None  # bundled word list when None
    start_word: str = Field(default="PORE", min_length=1)  # used by the fixed strategy
    target_word: str = Field(default="RUDE", min_length=1)
    show_errors: bool = False
    show_path: bool = False
    random_words: bool = False
    require_path: bool = True  # wrap the random strategy with the path guarantee
    max_attempts: int = Field(default=20, ge=1)
    seed: Optional[int] = None

    @property
    def strategy_kind(self) -> StrategyKind:
        """Strategy selected by the random-words and require-path flags."""
        if not self.random_words:
            return "FIXED"
        return "RANDOM_WITH_PATH" if self.require_path else "RANDOM"


class GameState(BaseModel):
    """Immutable snapshot of a session."""
    model_config = ConfigDict(frozen=True)

    start_word: Optional[str] = None
    target_word: Optional[str] = None
    path: List[str] = Field(default_factory=list)
    results: List[ValidationResult] = Field(default_factory=list)
    won: bool = False

    @property
    def steps(self) -> int:
        """Number of accepted guesses."""
        return len(self.results)


class Notification(BaseModel):
    """What observers receive after every state change."""
    state: GameState
    message: Optional[str] = None  # already blanked when show-errors is off
    warning: Optional[str] = None
