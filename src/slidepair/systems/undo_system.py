from esper import World

from slidepair.events.bus import EVENT_UNDO_APPLIED, EVENT_UNDO_REQUEST, EventBus
from slidepair.utils.game_state import commit_board, get_undo_history, is_idle


class UndoSystem:
    """Restores the board saved before the most recent slide or click.

    Only acts while idle; move and hint counters are left as they are.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_UNDO_REQUEST, self.on_undo_request)

    def on_undo_request(self, sender, **kwargs):
        if not is_idle(self.world):
            return
        history = get_undo_history(self.world)
        previous = history.pop()
        if previous is None:
            return
        commit_board(self.world, self.event_bus, previous, reason='undo')
        self.event_bus.emit(EVENT_UNDO_APPLIED, board=previous, remaining=len(history))
