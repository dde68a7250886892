from __future__ import annotations

import logging

from esper import World

from slidepair.engine.hints import find_hint
from slidepair.engine.pairs import find_all_pairs
from slidepair.events.bus import (
    EVENT_HINT_FOUND,
    EVENT_HINT_REQUEST,
    EVENT_HINT_UNAVAILABLE,
    EventBus,
)
from slidepair.utils.game_state import get_board, get_stats, is_idle

logger = logging.getLogger(__name__)


class HintSystem:
    """Answers hint requests.

    A pair that can be clicked right away is preferred; otherwise the first
    slide found by the exhaustive search is suggested. When neither exists the
    board is dead and EVENT_HINT_UNAVAILABLE invites a reshuffle.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_HINT_REQUEST, self.on_hint_request)

    def on_hint_request(self, sender, **kwargs):
        if not is_idle(self.world):
            logger.debug("hint request ignored while not idle")
            return
        get_stats(self.world).hints += 1
        board = get_board(self.world)
        pairs = find_all_pairs(board)
        if pairs:
            pair = pairs[0]
            self.event_bus.emit(
                EVENT_HINT_FOUND,
                kind='pair',
                positions=list(pair.positions),
                pair=pair,
                hint=None,
            )
            return
        hint = find_hint(board)
        if hint is None:
            self.event_bus.emit(EVENT_HINT_UNAVAILABLE)
            return
        self.event_bus.emit(
            EVENT_HINT_FOUND,
            kind='slide',
            positions=hint.positions,
            pair=None,
            hint=hint,
        )
