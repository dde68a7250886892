"""Entry point for the slidepair headless driver.

Sets up the ECS world, event bus and systems, then plays one game by
following hints: click a direct pair when there is one, perform the hinted
slide otherwise, reshuffle when the board is dead.

Run with: ``python src/main.py --seed 7``
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Dict, List, Optional

from slidepair.components.game_state import GamePhase
from slidepair.constants import BOARD_COLS, BOARD_ROWS, COPIES_PER_KIND
from slidepair.engine.board import board_to_text, count_remaining
from slidepair.events.bus import (
    EVENT_BOARD_RESHUFFLED,
    EVENT_DEADLOCK_DETECTED,
    EVENT_HINT_FOUND,
    EVENT_HINT_REQUEST,
    EVENT_HINT_UNAVAILABLE,
    EVENT_NEW_GAME_REQUEST,
    EVENT_RESHUFFLE_REQUEST,
    EVENT_SLIDE_REQUEST,
    EVENT_TILE_CLICK,
    EVENT_VICTORY,
    EventBus,
)
from slidepair.systems.board import BoardSystem
from slidepair.systems.game_flow_system import GameFlowSystem
from slidepair.systems.hint_system import HintSystem
from slidepair.systems.reshuffle_system import ReshuffleSystem
from slidepair.systems.undo_system import UndoSystem
from slidepair.systems.wave_playback import WavePlaybackSystem
from slidepair.utils.game_state import get_board, get_catalog, get_game_state, get_stats
from slidepair.utils.time_format import format_elapsed
from slidepair.world import create_world


class SlidepairSession:
    def __init__(
        self,
        *,
        rows: int = BOARD_ROWS,
        cols: int = BOARD_COLS,
        copies_per_kind: int = COPIES_PER_KIND,
        kind_ids: Optional[List[int]] = None,
        seed: Optional[int] = None,
    ):
        self.event_bus = EventBus()
        self.world = create_world(
            self.event_bus,
            rows=rows,
            cols=cols,
            copies_per_kind=copies_per_kind,
            kind_ids=kind_ids,
            rng=random.Random(seed),
        )
        self.game_flow_system = GameFlowSystem(self.world, self.event_bus)
        self.board_system = BoardSystem(self.world, self.event_bus)
        # Headless play commits waves as soon as they are computed.
        self.wave_playback_system = WavePlaybackSystem(self.world, self.event_bus, wave_interval=0.0)
        self.hint_system = HintSystem(self.world, self.event_bus)
        self.reshuffle_system = ReshuffleSystem(self.world, self.event_bus)
        self.undo_system = UndoSystem(self.world, self.event_bus)

        self.reshuffles = 0
        self.deadlocks = 0
        self._last_hint: Dict[str, object] = {}
        self.event_bus.subscribe(EVENT_HINT_FOUND, self._on_hint_found)
        self.event_bus.subscribe(EVENT_HINT_UNAVAILABLE, self._on_hint_unavailable)
        self.event_bus.subscribe(EVENT_DEADLOCK_DETECTED, self._on_deadlock)
        self.event_bus.subscribe(EVENT_BOARD_RESHUFFLED, self._on_reshuffled)
        self.event_bus.subscribe(EVENT_VICTORY, self._on_victory)

    def _on_hint_found(self, sender, **kwargs):
        self._last_hint = dict(kwargs)

    def _on_hint_unavailable(self, sender, **kwargs):
        self._last_hint = {'kind': 'none'}

    def _on_deadlock(self, sender, **kwargs):
        self.deadlocks += 1

    def _on_reshuffled(self, sender, **kwargs):
        self.reshuffles += 1

    def _on_victory(self, sender, **kwargs):
        logging.getLogger(__name__).info(
            "cleared in %d moves with %d hints (%s)",
            kwargs.get('moves', 0),
            kwargs.get('hints', 0),
            format_elapsed(kwargs.get('elapsed', 0.0)),
        )

    def step(self) -> bool:
        """Play one hinted action. Returns False once the game is over."""
        if get_game_state(self.world).phase == GamePhase.VICTORY:
            return False
        self._last_hint = {}
        self.event_bus.emit(EVENT_HINT_REQUEST)
        kind = self._last_hint.get('kind')
        if kind == 'pair':
            row, col = self._last_hint['positions'][0]
            self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)
        elif kind == 'slide':
            hint = self._last_hint['hint']
            leader = hint.group[0]
            self.event_bus.emit(
                EVENT_SLIDE_REQUEST,
                row=leader.row,
                col=leader.col,
                axis=hint.axis,
                delta=hint.delta,
            )
        elif kind == 'none':
            self.event_bus.emit(EVENT_RESHUFFLE_REQUEST)
        else:
            return False
        return True

    def play(self, max_steps: int) -> int:
        self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        steps = 0
        while steps < max_steps and self.step():
            steps += 1
        return steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a slidepair game by following hints.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for dealing and reshuffles")
    parser.add_argument("--max-steps", type=int, default=500, help="give up after this many actions")
    parser.add_argument("--rows", type=int, default=BOARD_ROWS)
    parser.add_argument("--cols", type=int, default=BOARD_COLS)
    parser.add_argument("--kinds", type=int, default=None, help="use only the first N kinds")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    kind_ids = list(range(args.kinds)) if args.kinds else None
    try:
        session = SlidepairSession(rows=args.rows, cols=args.cols, kind_ids=kind_ids, seed=args.seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    steps = session.play(args.max_steps)

    board = get_board(session.world)
    stats = get_stats(session.world)
    print(board_to_text(board, get_catalog(session.world).index()))
    print(
        f"steps={steps} moves={stats.moves} hints={stats.hints} "
        f"reshuffles={session.reshuffles} remaining={count_remaining(board)} "
        f"time={format_elapsed(stats.elapsed())}"
    )
    return 0 if count_remaining(board) == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
