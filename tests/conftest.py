import pytest

from weaver.environment import GameConfig, WeaverGame
from weaver.verifiers import Dictionary


# EAST-WAST-WEST and PORE-POLE-ROLE-RODE-RUDE are ladders; QUIZ and JAZZ are isolated
LADDER_WORDS = [
    "EAST", "WAST", "WEST", "VAST", "EASY", "TEST", "BEST",
    "PORE", "POLE", "ROLE", "RODE", "RUDE", "PURE",
    "QUIZ", "JAZZ",
]


@pytest.fixture
def dictionary() -> Dictionary:
    return Dictionary(LADDER_WORDS)


@pytest.fixture
def engine(dictionary) -> WeaverGame:
    """Fixed EAST -> WEST game, already initialized."""
    game = WeaverGame(
        dictionary=dictionary,
        config=GameConfig(start_word="EAST", target_word="WEST"),
    )
    game.initialize()
    return game
