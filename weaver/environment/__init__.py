"""Game environment for weaver."""

from .models import (
    StrategyKind,
    GameConfig,
    GameState,
    Notification,
)
from .strategies import (
    WordGenerationStrategy,
    FixedWordStrategy,
    RandomWordStrategy,
    PathGuaranteedStrategy,
    create_strategy,
)
from .game import WeaverGame

__all__ = [
    "StrategyKind",
    "GameConfig",
    "GameState",
    "Notification",
    "WordGenerationStrategy",
    "FixedWordStrategy",
    "RandomWordStrategy",
    "PathGuaranteedStrategy",
    "create_strategy",
    "WeaverGame",
]
