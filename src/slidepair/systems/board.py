from __future__ import annotations

import logging

from esper import World

from slidepair.components.game_state import GamePhase
from slidepair.engine.elimination import eliminate_pair, resolve_new_pair_chain
from slidepair.engine.movement import Axis, apply_slide, calc_max_slide, select_group
from slidepair.engine.pairs import find_pair_at
from slidepair.events.bus import (
    EVENT_CHAIN_RESOLVED,
    EVENT_SLIDE_APPLIED,
    EVENT_SLIDE_REJECTED,
    EVENT_SLIDE_REQUEST,
    EVENT_TILE_CLICK,
    EventBus,
)
from slidepair.utils.game_state import (
    commit_board,
    get_board,
    get_game_state,
    get_stats,
    get_undo_history,
    is_idle,
    set_phase,
)

logger = logging.getLogger(__name__)


class BoardSystem:
    """Turns slide requests and tile clicks into board changes and wave lists.

    A slide is only kept when it creates at least one new pair; the pairs it
    creates are chain-eliminated. A click removes exactly the clicked pair.
    Either way the computed waves are handed to playback via
    EVENT_CHAIN_RESOLVED and the phase switches to ANIMATING.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_SLIDE_REQUEST, self.on_slide_request)
        self.event_bus.subscribe(EVENT_TILE_CLICK, self.on_tile_click)

    def on_slide_request(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        axis = kwargs.get('axis')
        delta = kwargs.get('delta', 0)
        if row is None or col is None or axis is None:
            return
        try:
            axis = Axis(axis)
        except ValueError:
            self._reject('invalid_axis', dict(row=row, col=col, axis=axis, delta=delta))
            return
        request = dict(row=row, col=col, axis=axis, delta=delta)
        if not is_idle(self.world):
            self._reject('busy', request)
            return
        if delta == 0:
            self._reject('no_movement', request)
            return
        board = get_board(self.world)
        group = select_group(board, row, col, axis)
        if not group:
            self._reject('empty_cell', request)
            return
        if not calc_max_slide(board, group, axis).allows(delta):
            self._reject('out_of_range', request)
            return
        proposed = apply_slide(board, group, axis, delta)
        waves = resolve_new_pair_chain(board, proposed)
        if not waves:
            self._reject('no_new_pair', request)
            return

        get_undo_history(self.world).push(board)
        get_stats(self.world).moves += 1
        commit_board(self.world, self.event_bus, proposed, reason='slide')
        self.event_bus.emit(EVENT_SLIDE_APPLIED, group=group, axis=axis, delta=delta, board=proposed)
        set_phase(self.world, self.event_bus, GamePhase.ANIMATING)
        self.event_bus.emit(
            EVENT_CHAIN_RESOLVED,
            waves=waves,
            source='slide',
            generation=get_game_state(self.world).generation,
        )

    def on_tile_click(self, sender, **kwargs):
        row = kwargs.get('row')
        col = kwargs.get('col')
        if row is None or col is None:
            return
        if not is_idle(self.world):
            logger.debug("click at (%s, %s) ignored while not idle", row, col)
            return
        board = get_board(self.world)
        pair = find_pair_at(board, row, col)
        if pair is None:
            return
        get_undo_history(self.world).push(board)
        get_stats(self.world).moves += 1
        wave = eliminate_pair(board, pair)
        set_phase(self.world, self.event_bus, GamePhase.ANIMATING)
        self.event_bus.emit(
            EVENT_CHAIN_RESOLVED,
            waves=[wave],
            source='click',
            generation=get_game_state(self.world).generation,
        )

    def _reject(self, reason: str, request: dict) -> None:
        logger.debug("slide rejected (%s): %s", reason, request)
        self.event_bus.emit(EVENT_SLIDE_REJECTED, reason=reason, **request)
