from dataclasses import dataclass, field
from typing import List, Optional

from slidepair.constants import MAX_UNDO_STEPS
from slidepair.engine.board import Board


@dataclass(slots=True)
class UndoHistory:
    """Bounded stack of prior boards. Pushing onto a full stack drops the oldest."""

    max_steps: int = MAX_UNDO_STEPS
    snapshots: List[Board] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.max_steps < 1:
            raise ValueError("max_steps must be at least 1")

    def push(self, board: Board) -> None:
        self.snapshots.append(board)
        if len(self.snapshots) > self.max_steps:
            del self.snapshots[0]

    def pop(self) -> Optional[Board]:
        if not self.snapshots:
            return None
        return self.snapshots.pop()

    def clear(self) -> None:
        self.snapshots.clear()

    def __len__(self) -> int:
        return len(self.snapshots)
