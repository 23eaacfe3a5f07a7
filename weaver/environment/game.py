import random
import sys
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr

from .models import GameConfig, GameState, Notification
from .strategies import WordGenerationStrategy, create_strategy
from ..verifiers.data import Dictionary, load_dictionary
from ..verifiers.errors import (
    GameNotStartedError,
    InvalidWordError,
    LadderRuleError,
    WordGenerationError,
)
from ..verifiers.models import ValidationResult
from ..verifiers.pathfinder import differs_by_one_letter, find_shortest_path
from ..verifiers.validate import ValidatorConfig, validate


START_HINT = "Game started. Enter your first word."
RESET_HINT = "Game reset. Enter your first word."
WON_HINT = "You won the game!"
CONTINUE_HINT = "Continue playing."
ALREADY_WON = "The game is already won. Reset or start a new game."
LADDER_RULE = "Word must differ by exactly one letter from the previous word."


class WeaverGame(BaseModel):
    """
    Game engine for one word-ladder session.

    Owns the session (start word, target word, guessed path, per-step
    results, won flag) and the behavior flags. Validation, ladder search
    and word generation are delegated; nothing else here holds state.

    Attributes:
        dictionary: Shared read-only word list
        config: Behavior flags and fixed words
        on_update: Optional callback receiving a Notification after every change
        verbose: Print unexpected errors to stderr
        last_notification: The most recent Notification emitted
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    dictionary: Dictionary
    config: GameConfig = Field(default_factory=GameConfig)
    on_update: Optional[Callable[[Notification], None]] = None
    verbose: bool = False
    last_notification: Optional[Notification] = None

    _rng: random.Random = PrivateAttr(default=None)
    _strategy: Optional[WordGenerationStrategy] = PrivateAttr(default=None)
    _validator: ValidatorConfig = PrivateAttr(default_factory=ValidatorConfig)
    _start: Optional[str] = PrivateAttr(default=None)
    _target: Optional[str] = PrivateAttr(default=None)
    _path: List[str] = PrivateAttr(default_factory=list)
    _results: List[ValidationResult] = PrivateAttr(default_factory=list)
    _won: bool = PrivateAttr(default=False)

    def model_post_init(self, __context) -> None:
        """Seed the random generator and pick the validator; the strategy is built by initialize()."""
        self._rng = random.Random(self.config.seed)
        self.refresh_validator()

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        dictionary: Optional[Dictionary] = None,
        on_update: Optional[Callable[[Notification], None]] = None,
        verbose: bool = False,
        **config_kwargs: Any
    ) -> "WeaverGame":
        """
        Factory method to create an engine, loading the dictionary if needed.

        Args:
            config: Optional GameConfig instance
            dictionary: Preloaded dictionary; loaded from config.dictionary_path otherwise
            on_update: Observer callback
            verbose: Print unexpected errors to stderr
            **config_kwargs: Config parameters if config not provided

        Returns:
            An engine that still needs initialize()
        """
        if config is None:
            config = GameConfig(**config_kwargs)

        if dictionary is None:
            dictionary = load_dictionary(config.dictionary_path, word_length=config.word_length)

        return cls(dictionary=dictionary, config=config, on_update=on_update, verbose=verbose)

    # Flags

    def refresh_validator(self) -> None:
        """Select the validator variant for the current show-errors flag."""
        self._validator = ValidatorConfig(show_messages=self.config.show_errors)

    def refresh_strategy(self) -> None:
        """Select the word generation strategy for the current random-words flag."""
        self._strategy = create_strategy(self.config, self._rng)

    def _update_config(self, **changes: Any) -> None:
        self.config = self.config.model_copy(update=changes)

    def set_show_errors_flag(self, value: bool) -> None:
        self._update_config(show_errors=bool(value))
        self.refresh_validator()
        self._notify()

    def set_show_path_flag(self, value: bool) -> None:
        self._update_config(show_path=bool(value))
        self._notify()

    def set_random_word_flag(self, value: bool) -> None:
        """Takes effect on the next initialize()."""
        self._update_config(random_words=bool(value))
        self.refresh_strategy()
        self._notify()

    @property
    def show_errors(self) -> bool:
        return self.config.show_errors

    @property
    def show_path(self) -> bool:
        return self.config.show_path

    @property
    def random_words(self) -> bool:
        return self.config.random_words

    # Session accessors

    @property
    def is_started(self) -> bool:
        return self._start is not None and self._target is not None

    @property
    def start_word(self) -> Optional[str]:
        return self._start

    @property
    def target_word(self) -> Optional[str]:
        return self._target

    @property
    def path(self) -> List[str]:
        """Guessed path, starting with the start word (copy)."""
        return list(self._path)

    @property
    def results(self) -> List[ValidationResult]:
        """One result per guessed word after the start word (copy)."""
        return list(self._results)

    @property
    def won(self) -> bool:
        return self._won

    @property
    def dictionary_words(self) -> List[str]:
        return list(self.dictionary)

    @property
    def strategy(self) -> Optional[WordGenerationStrategy]:
        return self._strategy

    @property
    def strategy_path(self) -> List[str]:
        """Path cached by the active strategy, empty unless it computed one."""
        return self._strategy.get_path() if self._strategy else []

    def get_state(self) -> GameState:
        """Snapshot of the current session."""
        return GameState(
            start_word=self._start,
            target_word=self._target,
            path=list(self._path),
            results=list(self._results),
            won=self._won,
        )

    # Transitions

    def initialize(self) -> GameState:
        """
        Start a new session with words from the active strategy.

        Raises:
            WordGenerationError: If the strategy cannot produce a pair. The
                previous session, if any, is left as it was.
            InvalidArgumentError: If the configured fixed words are empty
        """
        self.refresh_strategy()
        self.refresh_validator()

        try:
            start, target = self._strategy.generate_words(self.dictionary)
        except WordGenerationError as e:
            warning = f"Could not generate initial/target words: {e}"
            if self.verbose:
                print(warning, file=sys.stderr)
            self._notify("Initialization failed.", warning)
            raise

        self._start = start.upper()
        self._target = target.upper()
        self._clear_session()
        self._notify(START_HINT)
        return self.get_state()

    def tick(self, guess: str) -> Optional[ValidationResult]:
        """
        Play one guess.

        The session is only changed once every check has passed.

        Args:
            guess: The next word of the ladder (any case)

        Returns:
            The ValidationResult for the guess, or None if an unexpected error
            occurred (reported as the notification warning)

        Raises:
            GameNotStartedError: If initialize() has not succeeded yet
            InvalidWordError: DictionaryError, LengthError or LadderRuleError
                when the guess is rejected
        """
        self._require_started()
        guess = guess.strip().upper()

        try:
            if self._won:
                raise InvalidWordError(ALREADY_WON)
            result = validate(guess, self._target, self.dictionary, self._validator)
            if not differs_by_one_letter(self._path[-1], guess):
                raise LadderRuleError(LADDER_RULE)
        except InvalidWordError as e:
            self._notify(str(e))
            raise
        except Exception as e:
            warning = f"An unexpected error occurred while processing your input: {e}"
            if self.verbose:
                print(warning, file=sys.stderr)
            self._notify(None, warning)
            return None

        self._path.append(guess)
        self._results.append(result)
        self._won = result.is_win

        self._notify(WON_HINT if self._won else result.message)
        return result

    def reset_game(self) -> GameState:
        """Back to the start word, keeping the same start and target."""
        self._require_started()
        self._clear_session()
        self._notify(RESET_HINT)
        return self.get_state()

    def get_full_solution_path(self) -> List[str]:
        """Shortest ladder from start to target, recomputed on every call."""
        if not self.is_started:
            return []
        return find_shortest_path(self._start, self._target, self.dictionary)

    def visible_solution_path(self) -> List[str]:
        """The full solution path when the show-path flag is on, else empty."""
        return self.get_full_solution_path() if self.show_path else []

    def _clear_session(self) -> None:
        self._path = [self._start]
        self._results = []
        self._won = False

    def _require_started(self) -> None:
        if not self.is_started:
            raise GameNotStartedError("Game not initialized. Call initialize() first.")

    def _notify(self, hint: Optional[str] = None, warning: Optional[str] = None) -> Notification:
        """Emit a snapshot; hint and warning are dropped when show-errors is off."""
        message = None
        if self.show_errors:
            if hint:
                message = hint
            else:
                message = WON_HINT if self._won else CONTINUE_HINT
        else:
            warning = None

        notification = Notification(state=self.get_state(), message=message, warning=warning)
        self.last_notification = notification
        if self.on_update is not None:
            self.on_update(notification)
        return notification
