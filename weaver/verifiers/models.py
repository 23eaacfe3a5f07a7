"""Data models for guess validation."""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict


class LetterState(str, Enum):
    """Feedback for a single letter of a guess."""
    CORRECT_POSITION = "CORRECT_POSITION"
    WRONG_POSITION = "WRONG_POSITION"
    NOT_IN_WORD = "NOT_IN_WORD"

    @property
    def code(self) -> str:
        """One-letter display code: G(reen), Y(ellow), L(ight grey)."""
        return _CODES[self]


_CODES: Dict[LetterState, str] = {
    LetterState.CORRECT_POSITION: "G",
    LetterState.WRONG_POSITION: "Y",
    LetterState.NOT_IN_WORD: "L",
}


class ValidationResult(BaseModel):
    """Per-position letter states for one guess against the target."""
    model_config = ConfigDict(frozen=True)

    states: Tuple[LetterState, ...] = ()  # indexed by position
    message: Optional[str] = None

    @property
    def letter_states(self) -> Mapping[int, LetterState]:
        """Read-only position -> state view."""
        return MappingProxyType(dict(enumerate(self.states)))

    @property
    def is_win(self) -> bool:
        """True iff every position is CORRECT_POSITION."""
        if not self.states:
            return False
        return all(s == LetterState.CORRECT_POSITION for s in self.states)

    def with_message(self, message: Optional[str]) -> "ValidationResult":
        """Return a copy carrying a different display message."""
        return self.model_copy(update={"message": message})
