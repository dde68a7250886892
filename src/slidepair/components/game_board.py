from dataclasses import dataclass

from slidepair.engine.board import Board


@dataclass(slots=True)
class GameBoard:
    """Holds the current board value for the session.

    The Board itself is immutable; systems replace ``board`` with a new value
    on every slide, click, wave, undo or reshuffle.
    """
    board: Board
