from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set, Tuple

from slidepair.engine.board import Board, Cell, Position

# Canonical pair identity: the two instance ids, smaller first.
PairKey = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Pair:
    """Two equal-kind cells adjacent in a row's or column's occupied sequence."""

    a: Cell
    b: Cell

    @property
    def key(self) -> PairKey:
        ia, ib = self.a.piece.instance_id, self.b.piece.instance_id
        return (ia, ib) if ia < ib else (ib, ia)

    @property
    def positions(self) -> Tuple[Position, Position]:
        return (self.a.position, self.b.position)

    def involves(self, row: int, col: int) -> bool:
        return (row, col) in self.positions


def scan_line(cells: Sequence[Cell]) -> List[Pair]:
    """Pair up equal neighbours in one line's occupied cells (already in order).

    Empty cells are not part of ``cells``, so neighbours in the sequence are
    either touching or separated only by gaps. The scan moves forward and a
    cell that was just paired is not reused: ``[A, A, A]`` yields one pair.
    """
    pairs: List[Pair] = []
    i = 0
    while i < len(cells) - 1:
        first, second = cells[i], cells[i + 1]
        if first.kind_id == second.kind_id:
            pairs.append(Pair(first, second))
            i += 2
        else:
            i += 1
    return pairs


def find_all_pairs(board: Board) -> List[Pair]:
    """Scan every row, then every column. A cell may occur in two pairs."""
    pairs: List[Pair] = []
    for row in range(board.height):
        pairs.extend(scan_line(board.row_cells(row)))
    for col in range(board.width):
        pairs.extend(scan_line(board.col_cells(col)))
    return pairs


def pair_keys(board: Board) -> Set[PairKey]:
    return {pair.key for pair in find_all_pairs(board)}


def has_pairs(board: Board) -> bool:
    for row in range(board.height):
        if scan_line(board.row_cells(row)):
            return True
    for col in range(board.width):
        if scan_line(board.col_cells(col)):
            return True
    return False


def find_pair_at(board: Board, row: int, col: int) -> Optional[Pair]:
    """First pair in scan order that includes the cell at (row, col)."""
    for pair in find_all_pairs(board):
        if pair.involves(row, col):
            return pair
    return None
