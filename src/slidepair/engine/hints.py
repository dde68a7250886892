from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Set

from slidepair.engine.board import Board, Position, iter_occupied
from slidepair.engine.movement import Axis, Group, apply_slide, calc_max_slide, select_group
from slidepair.engine.pairs import PairKey, find_all_pairs, has_pairs, pair_keys


@dataclass(frozen=True, slots=True)
class Hint:
    """A slide known to produce a pair: move ``group`` by ``delta`` along ``axis``."""

    group: Group
    axis: Axis
    delta: int

    @property
    def positions(self) -> List[Position]:
        return [cell.position for cell in self.group]


def iter_slides(board: Board) -> Iterator[Hint]:
    """Every legal non-zero slide on the board, in hint search order.

    Cells are visited row-major; each group is produced once, from its leader
    (first cell). Positive deltas come before negative ones.
    """
    for cell in iter_occupied(board):
        for axis in (Axis.HORIZONTAL, Axis.VERTICAL):
            group = select_group(board, cell.row, cell.col, axis)
            if group[0].position != cell.position:
                continue
            bounds = calc_max_slide(board, group, axis)
            for delta in range(1, bounds.max_positive + 1):
                yield Hint(group=group, axis=axis, delta=delta)
            for delta in range(1, bounds.max_negative + 1):
                yield Hint(group=group, axis=axis, delta=-delta)


def find_hint(board: Board, *, new_pairs_only: bool = False) -> Optional[Hint]:
    """Exhaustive search for a slide after which the board has a pair.

    ``None`` proves no such slide exists. With ``new_pairs_only`` a slide only
    qualifies when it creates a pair that was not already on the board.
    """
    existing: Set[PairKey] = pair_keys(board) if new_pairs_only else set()
    for hint in iter_slides(board):
        proposed = apply_slide(board, hint.group, hint.axis, hint.delta)
        if new_pairs_only:
            if any(pair.key not in existing for pair in find_all_pairs(proposed)):
                return hint
        elif has_pairs(proposed):
            return hint
    return None


def is_deadlocked(board: Board) -> bool:
    """No direct pair and no slide that makes one. An empty board is not deadlocked."""
    if next(iter_occupied(board), None) is None:
        return False
    return not has_pairs(board) and find_hint(board) is None
