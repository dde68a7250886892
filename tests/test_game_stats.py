from slidepair.components.game_stats import GameStats
from slidepair.utils.time_format import format_elapsed


class _FakeClock:
    def __init__(self) -> None:
        self.value = 0.0

    def advance(self, amount: float) -> None:
        self.value += amount

    def __call__(self) -> float:
        return self.value


def test_timer_runs_between_start_and_stop():
    clock = _FakeClock()
    stats = GameStats(clock=clock)
    assert stats.elapsed() == 0.0
    assert not stats.running

    stats.start()
    clock.advance(12.5)
    assert stats.running
    assert stats.elapsed() == 12.5

    assert stats.stop() == 12.5
    clock.advance(100.0)
    assert stats.elapsed() == 12.5


def test_reset_clears_counters_and_timer():
    clock = _FakeClock()
    stats = GameStats(moves=4, hints=2, clock=clock)
    stats.start()
    clock.advance(3.0)
    stats.reset()
    assert stats.moves == 0
    assert stats.hints == 0
    assert not stats.running
    assert stats.elapsed() == 0.0


def test_format_elapsed():
    assert format_elapsed(0) == "00:00:00"
    assert format_elapsed(59.9) == "00:00:59"
    assert format_elapsed(3725) == "01:02:05"
    assert format_elapsed(-4) == "00:00:00"
