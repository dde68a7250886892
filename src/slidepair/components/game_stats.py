from __future__ import annotations

from dataclasses import dataclass, field
from time import monotonic
from typing import Callable


@dataclass(slots=True)
class GameStats:
	"""Per-game counters and the play timer.

	``moves`` counts successful slides and clicks, ``hints`` counts hint
	requests. The timer runs from ``start()`` to ``stop()``; ``clock`` can be
	swapped for a fake in tests.
	"""

	moves: int = 0
	hints: int = 0
	clock: Callable[[], float] | None = field(default=None, repr=False)

	_clock: Callable[[], float] = field(init=False, repr=False)
	_started_at: float | None = field(init=False, default=None, repr=False)
	_elapsed: float = field(init=False, default=0.0, repr=False)

	def __post_init__(self) -> None:
		self._clock = self.clock or monotonic

	def reset(self) -> None:
		self.moves = 0
		self.hints = 0
		self._started_at = None
		self._elapsed = 0.0

	def start(self) -> None:
		self._started_at = self._clock()
		self._elapsed = 0.0

	def stop(self) -> float:
		if self._started_at is not None:
			self._elapsed = max(0.0, self._clock() - self._started_at)
			self._started_at = None
		return self._elapsed

	def elapsed(self) -> float:
		if self._started_at is None:
			return self._elapsed
		return max(0.0, self._clock() - self._started_at)

	@property
	def running(self) -> bool:
		return self._started_at is not None
