from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Deque, List

from esper import World

from slidepair.components.game_state import GamePhase
from slidepair.constants import WAVE_INTERVAL
from slidepair.engine.elimination import Wave
from slidepair.events.bus import (
    EVENT_CHAIN_COMPLETE,
    EVENT_CHAIN_RESOLVED,
    EVENT_TICK,
    EVENT_WAVE_COMMITTED,
    EventBus,
)
from slidepair.utils.game_state import commit_board, get_game_state, set_phase

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _QueuedWave:
    generation: int
    source: str
    index: int
    total: int
    wave: Wave


class WavePlaybackSystem:
    """Commits precomputed waves to the board one at a time, paced by ticks.

    Waves arrive fully computed; this system only decides when each one lands.
    Every queued wave remembers the generation it was computed for and is
    dropped if a new game has started since.
    """

    def __init__(self, world: World, event_bus: EventBus, *, wave_interval: float = WAVE_INTERVAL):
        self.world = world
        self.event_bus = event_bus
        self.wave_interval = max(0.0, float(wave_interval))
        self._queue: Deque[_QueuedWave] = deque()
        self._elapsed = 0.0
        self.event_bus.subscribe(EVENT_CHAIN_RESOLVED, self.on_chain_resolved)
        self.event_bus.subscribe(EVENT_TICK, self.on_tick)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def on_chain_resolved(self, sender, **kwargs):
        waves: List[Wave] = list(kwargs.get('waves') or [])
        generation = kwargs.get('generation')
        source = kwargs.get('source', 'unknown')
        if not waves or generation is None:
            return
        self._drop_stale()
        if not self._queue:
            self._elapsed = 0.0
        for index, wave in enumerate(waves):
            self._queue.append(_QueuedWave(generation, source, index, len(waves), wave))
        if self.wave_interval == 0.0:
            self._drain(float('inf'))

    def on_tick(self, sender, **kwargs):
        self._drop_stale()
        if not self._queue:
            return
        dt = kwargs.get('dt', 0.0) or 0.0
        self._elapsed += dt
        self._drain(self._elapsed)

    def _drop_stale(self) -> None:
        """Discard queued waves computed for an earlier game without spending ticks on them."""
        current = get_game_state(self.world).generation
        dropped = 0
        while self._queue and self._queue[0].generation != current:
            self._queue.popleft()
            dropped += 1
        if dropped:
            logger.debug("dropped %d wave(s) from an earlier game", dropped)
            if not self._queue:
                self._elapsed = 0.0

    def _drain(self, budget: float) -> None:
        while self._queue and budget >= self.wave_interval:
            budget -= self.wave_interval
            self._elapsed = max(0.0, self._elapsed - self.wave_interval)
            self._commit(self._queue.popleft())

    def _commit(self, item: _QueuedWave) -> None:
        state = get_game_state(self.world)
        if item.generation != state.generation:
            logger.debug(
                "dropping wave %d/%d from generation %d (current %d)",
                item.index + 1, item.total, item.generation, state.generation,
            )
            return
        commit_board(self.world, self.event_bus, item.wave.board_after, reason='wave')
        self.event_bus.emit(
            EVENT_WAVE_COMMITTED,
            index=item.index,
            pairs=item.wave.eliminated,
            board=item.wave.board_after,
            generation=item.generation,
        )
        if item.index == item.total - 1:
            set_phase(self.world, self.event_bus, GamePhase.IDLE)
            self.event_bus.emit(
                EVENT_CHAIN_COMPLETE,
                source=item.source,
                waves=item.total,
                generation=item.generation,
            )
