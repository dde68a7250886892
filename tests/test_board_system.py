import pytest

from slidepair.components.game_state import GamePhase
from slidepair.engine.board import board_from_kinds, count_remaining, get_piece
from slidepair.engine.movement import Axis
from slidepair.events.bus import (
    EVENT_CHAIN_RESOLVED,
    EVENT_SLIDE_APPLIED,
    EVENT_SLIDE_REJECTED,
    EVENT_SLIDE_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_UNDO_APPLIED,
    EVENT_UNDO_REQUEST,
    EventBus,
)
from slidepair.systems.board import BoardSystem
from slidepair.systems.undo_system import UndoSystem
from slidepair.systems.wave_playback import WavePlaybackSystem
from slidepair.utils.game_state import get_board, get_game_state, get_stats, get_undo_history
from tests.helpers import create_layout_world


def _setup(layout):
    bus = EventBus()
    world = create_layout_world(bus, layout)
    BoardSystem(world, bus)
    WavePlaybackSystem(world, bus, wave_interval=0.0)
    UndoSystem(world, bus)
    return bus, world


def test_slide_creating_pair_is_kept_and_eliminated():
    bus, world = _setup([[0, None], [1, 0]])
    applied: list[dict] = []
    resolved: list[dict] = []
    bus.subscribe(EVENT_SLIDE_APPLIED, lambda sender, **payload: applied.append(payload))
    bus.subscribe(EVENT_CHAIN_RESOLVED, lambda sender, **payload: resolved.append(payload))

    bus.emit(EVENT_SLIDE_REQUEST, row=0, col=0, axis=Axis.HORIZONTAL, delta=1)

    assert len(applied) == 1
    assert [cell.position for cell in applied[0]["group"]] == [(0, 0)]
    assert resolved[0]["source"] == "slide"
    assert len(resolved[0]["waves"]) == 1
    board = get_board(world)
    assert count_remaining(board) == 1
    assert get_piece(board, 1, 0).kind_id == 1
    assert get_stats(world).moves == 1
    assert len(get_undo_history(world)) == 1
    assert get_game_state(world).phase == GamePhase.IDLE


def test_axis_may_be_given_by_value():
    bus, world = _setup([[0, None], [1, 0]])
    bus.emit(EVENT_SLIDE_REQUEST, row=0, col=0, axis="horizontal", delta=1)
    assert count_remaining(get_board(world)) == 1


@pytest.mark.parametrize(
    "request_kwargs, reason",
    [
        (dict(row=0, col=0, axis=Axis.HORIZONTAL, delta=1), "no_new_pair"),
        (dict(row=0, col=0, axis=Axis.HORIZONTAL, delta=3), "out_of_range"),
        (dict(row=0, col=0, axis=Axis.HORIZONTAL, delta=-1), "out_of_range"),
        (dict(row=0, col=3, axis=Axis.HORIZONTAL, delta=1), "empty_cell"),
        (dict(row=0, col=0, axis=Axis.HORIZONTAL, delta=0), "no_movement"),
        (dict(row=0, col=0, axis="diagonal", delta=1), "invalid_axis"),
    ],
)
def test_rejected_slide_leaves_board_untouched(request_kwargs, reason):
    bus, world = _setup([[0, 1, None, None]])
    before = get_board(world)
    rejected: list[dict] = []
    bus.subscribe(EVENT_SLIDE_REJECTED, lambda sender, **payload: rejected.append(payload))

    bus.emit(EVENT_SLIDE_REQUEST, **request_kwargs)

    assert [evt["reason"] for evt in rejected] == [reason]
    assert get_board(world) is before
    assert get_stats(world).moves == 0
    assert len(get_undo_history(world)) == 0


def test_slide_rejected_while_animating():
    bus, world = _setup([[0, None], [1, 0]])
    get_game_state(world).phase = GamePhase.ANIMATING
    rejected: list[dict] = []
    bus.subscribe(EVENT_SLIDE_REJECTED, lambda sender, **payload: rejected.append(payload))

    bus.emit(EVENT_SLIDE_REQUEST, row=0, col=0, axis=Axis.HORIZONTAL, delta=1)

    assert rejected[0]["reason"] == "busy"
    assert count_remaining(get_board(world)) == 3


def test_click_removes_only_the_clicked_pair():
    bus, world = _setup([[0, 0, 1, 1]])
    resolved: list[dict] = []
    bus.subscribe(EVENT_CHAIN_RESOLVED, lambda sender, **payload: resolved.append(payload))

    bus.emit(EVENT_TILE_CLICK, row=0, col=2)

    assert resolved[0]["source"] == "click"
    assert len(resolved[0]["waves"]) == 1
    board = get_board(world)
    assert get_piece(board, 0, 0).kind_id == 0
    assert get_piece(board, 0, 2) is None
    assert get_stats(world).moves == 1


def test_click_on_unpaired_tile_does_nothing():
    bus, world = _setup([[0, 1, 2]])
    before = get_board(world)
    bus.emit(EVENT_TILE_CLICK, row=0, col=1)
    bus.emit(EVENT_TILE_CLICK, row=5, col=5)
    assert get_board(world) is before
    assert get_stats(world).moves == 0


def test_undo_restores_board_before_slide():
    bus, world = _setup([[0, None], [1, 0]])
    initial = get_board(world)
    undone: list[dict] = []
    bus.subscribe(EVENT_UNDO_APPLIED, lambda sender, **payload: undone.append(payload))

    bus.emit(EVENT_SLIDE_REQUEST, row=0, col=0, axis=Axis.HORIZONTAL, delta=1)
    bus.emit(EVENT_UNDO_REQUEST)

    assert get_board(world) is initial
    assert undone == [{"board": initial, "remaining": 0}]
    assert get_stats(world).moves == 1

    bus.emit(EVENT_UNDO_REQUEST)
    assert len(undone) == 1


def test_undo_ignored_while_animating():
    bus, world = _setup([[0, 0, 1, 1]])
    bus.emit(EVENT_TILE_CLICK, row=0, col=0)
    after_click = get_board(world)
    get_game_state(world).phase = GamePhase.ANIMATING

    bus.emit(EVENT_UNDO_REQUEST)

    assert get_board(world) is after_click
    assert len(get_undo_history(world)) == 1
    assert board_from_kinds([[0, 0, 1, 1]]) == get_undo_history(world).snapshots[0]


def test_closing_gap_between_paired_tiles_is_rejected():
    bus, world = _setup([[0, None, 0]])
    before = get_board(world)
    rejected: list[dict] = []
    bus.subscribe(EVENT_SLIDE_REJECTED, lambda sender, **payload: rejected.append(payload))

    bus.emit(EVENT_SLIDE_REQUEST, row=0, col=0, axis=Axis.HORIZONTAL, delta=1)

    assert [evt["reason"] for evt in rejected] == ["no_new_pair"]
    assert get_board(world) is before
