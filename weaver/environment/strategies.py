"""Word generation strategies: pick the (start, target) pair for a session."""

import random
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple

from .models import GameConfig, StrategyKind
from ..verifiers.errors import InvalidArgumentError, WordGenerationError
from ..verifiers.pathfinder import find_shortest_path


class WordGenerationStrategy(ABC):
    """Interface every word generation strategy implements."""

    @property
    @abstractmethod
    def kind(self) -> StrategyKind:
        """Strategy kind (used by the engine and in reports)."""
        ...

    @abstractmethod
    def generate_words(self, dictionary: Iterable[str]) -> Tuple[str, str]:
        """Return a (start, target) pair."""
        ...

    def get_path(self) -> List[str]:
        """Solution path found while generating, empty if none was computed."""
        return []


class FixedWordStrategy(WordGenerationStrategy):
    """Always hands out the same preconfigured pair."""

    def __init__(self, start: Optional[str], target: Optional[str]) -> None:
        if not start or not target:
            raise InvalidArgumentError("Fixed strategy needs a non-empty start and target word")
        self.start = start.strip().upper()
        self.target = target.strip().upper()

    @property
    def kind(self) -> StrategyKind:
        return "FIXED"

    def generate_words(self, dictionary: Iterable[str]) -> Tuple[str, str]:
        return self.start, self.target


class RandomWordStrategy(WordGenerationStrategy):
    """Two distinct words drawn uniformly from the dictionary."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    @property
    def kind(self) -> StrategyKind:
        return "RANDOM"

    def generate_words(self, dictionary: Iterable[str]) -> Tuple[str, str]:
        words = list(dictionary)
        if len(words) < 2:
            raise WordGenerationError("Insufficient valid words")

        first = self._rng.randrange(len(words))
        second = self._rng.randrange(len(words))
        while second == first:
            second = self._rng.randrange(len(words))

        return words[first], words[second]


class PathGuaranteedStrategy(WordGenerationStrategy):
    """
    Wraps a base strategy and only accepts pairs joined by a ladder.

    The base strategy is re-invoked up to `max_attempts` times; the path of
    the accepted pair is kept for get_path().
    """

    def __init__(self, base: WordGenerationStrategy, max_attempts: int = 20) -> None:
        if max_attempts < 1:
            raise InvalidArgumentError("max_attempts must be at least 1")
        self.base = base
        self.max_attempts = max_attempts
        self._path: List[str] = []

    @property
    def kind(self) -> StrategyKind:
        return "RANDOM_WITH_PATH"

    def generate_words(self, dictionary: Iterable[str]) -> Tuple[str, str]:
        for _ in range(self.max_attempts):
            start, target = self.base.generate_words(dictionary)
            self._path = find_shortest_path(start, target, dictionary)
            if self._path:
                return start, target
        raise WordGenerationError("No path found")

    def get_path(self) -> List[str]:
        return list(self._path)


def create_strategy(
    config: GameConfig,
    rng: Optional[random.Random] = None,
) -> WordGenerationStrategy:
    """
    Build the strategy selected by the configuration flags.

    Args:
        config: Game configuration (random_words, require_path, fixed words)
        rng: Random generator shared with the engine

    Returns:
        FixedWordStrategy, RandomWordStrategy, or a RandomWordStrategy
        wrapped in PathGuaranteedStrategy
    """
    kind = config.strategy_kind
    if kind == "FIXED":
        return FixedWordStrategy(config.start_word, config.target_word)
    if kind == "RANDOM":
        return RandomWordStrategy(rng)
    return PathGuaranteedStrategy(RandomWordStrategy(rng), max_attempts=config.max_attempts)
