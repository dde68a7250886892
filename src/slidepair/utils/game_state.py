from __future__ import annotations

from esper import World

from slidepair.components.board_shape import BoardShape
from slidepair.components.game_board import GameBoard
from slidepair.components.game_state import GamePhase, GameState
from slidepair.components.game_stats import GameStats
from slidepair.components.session import Session
from slidepair.components.tile_catalog import TileCatalog
from slidepair.components.undo_history import UndoHistory
from slidepair.engine.board import Board
from slidepair.events.bus import EVENT_BOARD_CHANGED, EVENT_PHASE_CHANGED, EventBus


def get_session_entity(world: World) -> int:
    for entity, _ in world.get_component(Session):
        return entity
    raise RuntimeError("Session entity not found")


def _session_component(world: World, component_type):
    return world.component_for_entity(get_session_entity(world), component_type)


def get_game_board(world: World) -> GameBoard:
    return _session_component(world, GameBoard)


def get_board(world: World) -> Board:
    return get_game_board(world).board


def get_game_state(world: World) -> GameState:
    return _session_component(world, GameState)


def get_undo_history(world: World) -> UndoHistory:
    return _session_component(world, UndoHistory)


def get_stats(world: World) -> GameStats:
    return _session_component(world, GameStats)


def get_catalog(world: World) -> TileCatalog:
    return _session_component(world, TileCatalog)


def get_board_shape(world: World) -> BoardShape:
    return _session_component(world, BoardShape)


def commit_board(world: World, event_bus: EventBus, board: Board, *, reason: str) -> None:
    """Replace the session board and announce it."""

    get_game_board(world).board = board
    event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, board=board)


def set_phase(world: World, event_bus: EventBus, phase: GamePhase) -> None:
    """Update the game phase and emit a change event when it differs."""

    state = get_game_state(world)
    previous = state.phase
    if previous == phase:
        return
    state.phase = phase
    event_bus.emit(EVENT_PHASE_CHANGED, previous_phase=previous, new_phase=phase)


def is_idle(world: World) -> bool:
    return get_game_state(world).phase == GamePhase.IDLE
