"""Exceptions raised by the verifiers and the game engine."""


class WeaverError(Exception):
    """Base class for all game errors."""


class InvalidWordError(WeaverError):
    """A guess was rejected and not recorded."""


class DictionaryError(InvalidWordError):
    """A guess or target word is not in the dictionary."""


class LengthError(InvalidWordError):
    """A guess does not have the same length as the target word."""


class LadderRuleError(InvalidWordError):
    """A guess does not differ from the previous word by exactly one letter."""


class WordGenerationError(WeaverError):
    """A strategy could not produce a usable (start, target) pair."""


class DictionaryLoadError(WeaverError):
    """The dictionary source did not yield enough words."""


class GameNotStartedError(WeaverError):
    """An operation needs a session but initialize() has not succeeded yet."""


class InvalidArgumentError(WeaverError, ValueError):
    """A constructor or setter received an unusable argument."""
