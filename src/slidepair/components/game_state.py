"""Game state resource describing the active phase and game generation."""
from dataclasses import dataclass
from enum import Enum, auto


class GamePhase(Enum):
    """Phases that gate which requests are accepted."""
    IDLE = auto()
    ANIMATING = auto()
    VICTORY = auto()


@dataclass
class GameState:
    """Singleton component storing the phase and the game generation.

    ``generation`` increases with every new game; work captured under an older
    generation must not touch the board any more.
    """
    phase: GamePhase = GamePhase.IDLE
    generation: int = 0
