"""High-level coordinator for dealing new games and judging finished moves."""
from __future__ import annotations

import logging
import random

from esper import World

from slidepair.components.game_state import GamePhase
from slidepair.constants import MAX_SHUFFLE_RETRIES
from slidepair.engine.deal import deal_board
from slidepair.engine.elimination import check_victory
from slidepair.engine.hints import is_deadlocked
from slidepair.events.bus import (
    EVENT_CHAIN_COMPLETE,
    EVENT_DEADLOCK_DETECTED,
    EVENT_GAME_STARTED,
    EVENT_NEW_GAME_REQUEST,
    EVENT_VICTORY,
    EventBus,
)
from slidepair.utils.game_state import (
    commit_board,
    get_board,
    get_board_shape,
    get_catalog,
    get_game_state,
    get_stats,
    get_undo_history,
    set_phase,
)

logger = logging.getLogger(__name__)


class GameFlowSystem:
    """Starts games and decides victory or deadlock once a move has played out."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        max_deal_retries: int = MAX_SHUFFLE_RETRIES,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self._max_deal_retries = max_deal_retries
        self.event_bus.subscribe(EVENT_NEW_GAME_REQUEST, self.on_new_game)
        self.event_bus.subscribe(EVENT_CHAIN_COMPLETE, self.on_chain_complete)

    def on_new_game(self, sender, **kwargs):
        state = get_game_state(self.world)
        # Bumping the generation invalidates any waves still queued for the old board.
        state.generation += 1
        get_undo_history(self.world).clear()
        stats = get_stats(self.world)
        stats.reset()

        shape = get_board_shape(self.world)
        result = deal_board(
            get_catalog(self.world).active_kinds(),
            shape.rows,
            shape.cols,
            copies_per_kind=shape.copies_per_kind,
            rng=self._rng,
            max_retries=self._max_deal_retries,
        )
        commit_board(self.world, self.event_bus, result.board, reason="new_game")
        set_phase(self.world, self.event_bus, GamePhase.IDLE)
        stats.start()
        logger.debug("game %d dealt after %d attempt(s)", state.generation, result.attempts)
        self.event_bus.emit(
            EVENT_GAME_STARTED,
            generation=state.generation,
            board=result.board,
            solvable=result.solvable,
            attempts=result.attempts,
        )

    def on_chain_complete(self, sender, **kwargs):
        state = get_game_state(self.world)
        if kwargs.get("generation") != state.generation:
            return
        board = get_board(self.world)
        if check_victory(board):
            set_phase(self.world, self.event_bus, GamePhase.VICTORY)
            stats = get_stats(self.world)
            elapsed = stats.stop()
            self.event_bus.emit(EVENT_VICTORY, moves=stats.moves, hints=stats.hints, elapsed=elapsed)
            return
        if is_deadlocked(board):
            self.event_bus.emit(EVENT_DEADLOCK_DETECTED, board=board)
