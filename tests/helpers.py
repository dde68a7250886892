from __future__ import annotations

import random
from typing import Optional, Sequence

from esper import World

from slidepair.engine.board import Board, board_from_kinds
from slidepair.events.bus import EVENT_TICK, EventBus
from slidepair.utils.game_state import get_game_board
from slidepair.world import create_world


def drive_ticks(bus: EventBus, count: int = 20, dt: float = 0.05) -> None:
    for _ in range(count):
        bus.emit(EVENT_TICK, dt=dt)


def install_board(world: World, layout: Sequence[Sequence[Optional[int]]]) -> Board:
    """Replace the session board with a hand-built layout of kind ids."""

    board = board_from_kinds(layout)
    get_game_board(world).board = board
    return board


def create_layout_world(
    bus: EventBus,
    layout: Sequence[Sequence[Optional[int]]],
    *,
    seed: int = 1,
) -> World:
    """World shaped like ``layout`` with that layout already on the board.

    Dealing is sized for one copy of a single kind so any layout fits.
    """

    world = create_world(
        bus,
        rows=len(layout),
        cols=len(layout[0]),
        copies_per_kind=1,
        kind_ids=[0],
        rng=random.Random(seed),
    )
    install_board(world, layout)
    return world
