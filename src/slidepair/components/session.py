from dataclasses import dataclass

@dataclass(slots=True)
class Session:
    """Empty tag component marking the entity that carries the game session.

    The same entity holds GameBoard, UndoHistory, GameState, GameStats,
    TileCatalog and BoardShape.
    """
    pass
