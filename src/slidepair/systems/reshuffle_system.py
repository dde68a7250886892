from __future__ import annotations

import logging
import random

from esper import World

from slidepair.constants import MAX_RESHUFFLE_ATTEMPTS
from slidepair.engine.pairs import has_pairs
from slidepair.engine.reshuffle import reshuffle_remaining_tiles
from slidepair.events.bus import EVENT_BOARD_RESHUFFLED, EVENT_RESHUFFLE_REQUEST, EventBus
from slidepair.utils.game_state import commit_board, get_board, is_idle

logger = logging.getLogger(__name__)


class ReshuffleSystem:
    """Redistributes kinds over the remaining tiles when the player confirms a reshuffle."""

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        rng: random.Random | None = None,
        max_attempts: int = MAX_RESHUFFLE_ATTEMPTS,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng = rng or getattr(world, "random", None) or random.Random()
        self._max_attempts = max_attempts
        self.event_bus.subscribe(EVENT_RESHUFFLE_REQUEST, self.on_reshuffle_request)

    def on_reshuffle_request(self, sender, **kwargs):
        if not is_idle(self.world):
            logger.debug("reshuffle request ignored while not idle")
            return
        board = get_board(self.world)
        reshuffled = reshuffle_remaining_tiles(board, self._rng, max_attempts=self._max_attempts)
        if reshuffled is board:
            return
        commit_board(self.world, self.event_bus, reshuffled, reason='reshuffle')
        self.event_bus.emit(EVENT_BOARD_RESHUFFLED, board=reshuffled, solvable=has_pairs(reshuffled))
