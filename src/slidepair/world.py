from __future__ import annotations

import random
from typing import Callable, Iterable

from esper import World

from slidepair.components.board_shape import BoardShape
from slidepair.components.game_board import GameBoard
from slidepair.components.game_state import GamePhase, GameState
from slidepair.components.game_stats import GameStats
from slidepair.components.session import Session
from slidepair.components.tile_catalog import TileCatalog
from slidepair.components.undo_history import UndoHistory
from slidepair.constants import BOARD_COLS, BOARD_ROWS, COPIES_PER_KIND, MAX_UNDO_STEPS
from slidepair.engine.board import create_empty_board
from slidepair.engine.catalog import build_catalog
from .events.bus import EventBus


def create_world(
    event_bus: EventBus,
    *,
    rows: int = BOARD_ROWS,
    cols: int = BOARD_COLS,
    copies_per_kind: int = COPIES_PER_KIND,
    kind_ids: Iterable[int] | None = None,
    max_undo_steps: int = MAX_UNDO_STEPS,
    rng: random.Random | None = None,
    clock: Callable[[], float] | None = None,
) -> World:
    """Create the session world with an empty board; systems deal the first game.

    ``kind_ids`` restricts the kinds used for new decks, which lets a small
    board hold a full deck (e.g. 2 kinds x 4 copies on a 2x4 board).
    """
    world = World()
    setattr(world, "random", rng or random.Random())

    shape = BoardShape(rows=rows, cols=cols, copies_per_kind=copies_per_kind)
    catalog = TileCatalog(kinds=build_catalog(), active=list(kind_ids or []))
    deck_size = len(catalog.active) * copies_per_kind
    if deck_size > shape.cell_count:
        raise ValueError(
            f"{len(catalog.active)} kinds x {copies_per_kind} copies do not fit a {rows}x{cols} board"
        )

    world.create_entity(
        Session(),
        GameBoard(board=create_empty_board(rows, cols)),
        GameState(phase=GamePhase.IDLE, generation=0),
        UndoHistory(max_steps=max_undo_steps),
        GameStats(clock=clock),
        catalog,
        shape,
    )
    return world
