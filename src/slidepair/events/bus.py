from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even if nobody else holds the system.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float


# ============================================================================
# REQUESTS (presentation layer -> engine)
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"        # payload: None
EVENT_SLIDE_REQUEST = "slide_request"              # payload: row, col, axis=Axis, delta=int
EVENT_TILE_CLICK = "tile_click"                    # payload: row, col
EVENT_HINT_REQUEST = "hint_request"                # payload: None
EVENT_UNDO_REQUEST = "undo_request"                # payload: None
EVENT_RESHUFFLE_REQUEST = "reshuffle_request"      # payload: None


# ============================================================================
# BOARD & ELIMINATION
# ============================================================================
EVENT_GAME_STARTED = "game_started"                # payload: generation=int, board=Board, solvable=bool, attempts=int
EVENT_SLIDE_REJECTED = "slide_rejected"            # payload: reason=str, row, col, axis, delta
EVENT_SLIDE_APPLIED = "slide_applied"              # payload: group=tuple[Cell], axis, delta, board=Board
EVENT_CHAIN_RESOLVED = "chain_resolved"            # payload: waves=list[Wave], source=str, generation=int
EVENT_WAVE_COMMITTED = "wave_committed"            # payload: index=int, pairs=tuple[Pair], board=Board, generation=int
EVENT_CHAIN_COMPLETE = "chain_complete"            # payload: source=str, waves=int, generation=int
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, board=Board


# ============================================================================
# HINTS, DEADLOCK & RESHUFFLE
# ============================================================================
EVENT_HINT_FOUND = "hint_found"                    # payload: kind='pair'|'slide', positions=list[(r,c)], hint=Hint|None, pair=Pair|None
EVENT_HINT_UNAVAILABLE = "hint_unavailable"        # payload: None
EVENT_DEADLOCK_DETECTED = "deadlock_detected"      # payload: board=Board
EVENT_BOARD_RESHUFFLED = "board_reshuffled"        # payload: board=Board, solvable=bool


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_UNDO_APPLIED = "undo_applied"                # payload: board=Board, remaining=int
EVENT_VICTORY = "victory"                          # payload: moves=int, hints=int, elapsed=float
EVENT_PHASE_CHANGED = "phase_changed"              # payload: previous_phase=GamePhase|None, new_phase=GamePhase
