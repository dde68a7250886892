"""Group selection, slide bounds and slide application."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from slidepair.constants import DRAG_THRESHOLD, TILE_GAP, TILE_HEIGHT, TILE_WIDTH
from slidepair.engine.board import Board, Cell, get_piece, set_pieces


class Axis(Enum):
    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'

    @property
    def step(self) -> Tuple[int, int]:
        """(d_row, d_col) of one cell in the positive direction."""
        return (0, 1) if self is Axis.HORIZONTAL else (1, 0)


Group = Tuple[Cell, ...]


@dataclass(frozen=True, slots=True)
class SlideBounds:
    """How far a group may move: right/down (positive) and left/up (negative)."""

    max_positive: int
    max_negative: int

    def allows(self, delta: int) -> bool:
        return -self.max_negative <= delta <= self.max_positive


def select_group(board: Board, anchor_row: int, anchor_col: int, axis: Axis) -> Group:
    """Collect the contiguous run through the anchor along ``axis``.

    Returns an empty tuple when the anchor cell is empty; otherwise cells are
    ordered by increasing coordinate along the axis.
    """
    anchor = get_piece(board, anchor_row, anchor_col)
    if anchor is None:
        return ()
    d_row, d_col = axis.step
    before = _walk(board, anchor_row, anchor_col, -d_row, -d_col)
    after = _walk(board, anchor_row, anchor_col, d_row, d_col)
    before.reverse()
    return tuple(before) + (Cell(anchor_row, anchor_col, anchor),) + tuple(after)


def _walk(board: Board, row: int, col: int, d_row: int, d_col: int) -> List[Cell]:
    cells: List[Cell] = []
    row, col = row + d_row, col + d_col
    piece = get_piece(board, row, col)
    while piece is not None:
        cells.append(Cell(row, col, piece))
        row, col = row + d_row, col + d_col
        piece = get_piece(board, row, col)
    return cells


def _coord(cell: Cell, axis: Axis) -> int:
    return cell.col if axis is Axis.HORIZONTAL else cell.row


def calc_max_slide(board: Board, group: Sequence[Cell], axis: Axis) -> SlideBounds:
    """Free cells beyond each end of ``group`` before an obstacle or the edge."""
    if not group:
        return SlideBounds(0, 0)
    low = min(_coord(cell, axis) for cell in group)
    high = max(_coord(cell, axis) for cell in group)
    extent = board.width if axis is Axis.HORIZONTAL else board.height

    def occupied(coord: int) -> bool:
        if axis is Axis.HORIZONTAL:
            return get_piece(board, group[0].row, coord) is not None
        return get_piece(board, coord, group[0].col) is not None

    max_negative = low
    for coord in range(low - 1, -1, -1):
        if occupied(coord):
            max_negative = low - coord - 1
            break
    max_positive = extent - 1 - high
    for coord in range(high + 1, extent):
        if occupied(coord):
            max_positive = coord - high - 1
            break
    return SlideBounds(max_positive=max_positive, max_negative=max_negative)


def apply_slide(board: Board, group: Sequence[Cell], axis: Axis, delta: int) -> Board:
    """Move every group cell by ``delta`` along ``axis``.

    ``delta == 0`` returns ``board`` itself. The delta is not range-checked;
    callers keep it within :func:`calc_max_slide`.
    """
    if delta == 0:
        return board
    d_row, d_col = axis.step
    updates = [(cell.row, cell.col, None) for cell in group]
    updates.extend((cell.row + d_row * delta, cell.col + d_col * delta, cell.piece) for cell in group)
    return set_pieces(board, updates)


def pixels_to_cells(
    pixel_offset: float,
    axis: Axis,
    *,
    tile_width: int = TILE_WIDTH,
    tile_height: int = TILE_HEIGHT,
    gap: int = TILE_GAP,
) -> int:
    """Nearest whole-cell delta for a drag offset; halves round up."""
    pitch = (tile_width if axis is Axis.HORIZONTAL else tile_height) + gap
    return int(math.floor(pixel_offset / pitch + 0.5))


def clamp_delta(delta: int, max_positive: int, max_negative: int) -> int:
    clamped = max(-max_negative, min(max_positive, delta))
    return int(clamped) or 0


def lock_drag_axis(dx: float, dy: float, threshold: float = DRAG_THRESHOLD) -> Optional[Axis]:
    """Axis a drag commits to once it travels ``threshold`` pixels, else None."""
    if abs(dx) < threshold and abs(dy) < threshold:
        return None
    return Axis.HORIZONTAL if abs(dx) >= abs(dy) else Axis.VERTICAL
