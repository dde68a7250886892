"""Immutable board value and the pure functions that derive new boards from it.

A ``Board`` is never modified in place. Every mutator returns a new ``Board``
and shares untouched rows with its source, so boards can be kept as undo
snapshots and compared by value before/after a move.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from slidepair.engine.catalog import PieceInstance, PieceKind

Position = Tuple[int, int]
Row = Tuple[Optional[PieceInstance], ...]


@dataclass(frozen=True, slots=True)
class Cell:
    """An occupied board cell: coordinates plus the piece sitting there."""

    row: int
    col: int
    piece: PieceInstance

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    @property
    def kind_id(self) -> int:
        return self.piece.kind_id


@dataclass(frozen=True, slots=True)
class Board:
    width: int
    height: int
    grid: Tuple[Row, ...]

    def __post_init__(self) -> None:
        if len(self.grid) != self.height or any(len(row) != self.width for row in self.grid):
            raise ValueError(f"grid does not match {self.height}x{self.width}")

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def row_cells(self, row: int) -> List[Cell]:
        return [Cell(row, col, piece) for col, piece in enumerate(self.grid[row]) if piece is not None]

    def col_cells(self, col: int) -> List[Cell]:
        return [
            Cell(row, col, self.grid[row][col])
            for row in range(self.height)
            if self.grid[row][col] is not None
        ]


def create_empty_board(rows: int, cols: int) -> Board:
    if rows < 1 or cols < 1:
        raise ValueError("board dimensions must be positive")
    empty_row: Row = (None,) * cols
    return Board(width=cols, height=rows, grid=(empty_row,) * rows)


def create_board_from_deck(deck: Sequence[PieceInstance], rows: int, cols: int) -> Board:
    """Fill the board row by row from ``deck``; cells past the deck stay empty."""
    if rows < 1 or cols < 1:
        raise ValueError("board dimensions must be positive")
    if len(deck) > rows * cols:
        raise ValueError(f"deck of {len(deck)} pieces does not fit a {rows}x{cols} board")
    grid = []
    for row in range(rows):
        start = row * cols
        chunk = list(deck[start:start + cols])
        chunk.extend([None] * (cols - len(chunk)))
        grid.append(tuple(chunk))
    return Board(width=cols, height=rows, grid=tuple(grid))


def board_from_kinds(layout: Sequence[Sequence[Optional[int]]]) -> Board:
    """Build a board from a 2D list of kind ids (``None`` = empty).

    Instance ids are assigned in row-major order over occupied cells.
    """
    if not layout or not layout[0]:
        raise ValueError("layout must have at least one row and column")
    width = len(layout[0])
    next_id = 0
    grid = []
    for values in layout:
        if len(values) != width:
            raise ValueError("layout rows must have equal length")
        row: List[Optional[PieceInstance]] = []
        for kind_id in values:
            if kind_id is None:
                row.append(None)
                continue
            row.append(PieceInstance(instance_id=next_id, kind_id=kind_id))
            next_id += 1
        grid.append(tuple(row))
    return Board(width=width, height=len(layout), grid=tuple(grid))


def get_piece(board: Board, row: int, col: int) -> Optional[PieceInstance]:
    """Return the piece at (row, col); out-of-range coordinates read as empty."""
    if not board.in_bounds(row, col):
        return None
    return board.grid[row][col]


def set_piece(board: Board, row: int, col: int, piece: Optional[PieceInstance]) -> Board:
    return set_pieces(board, [(row, col, piece)])


def set_pieces(board: Board, updates: Iterable[Tuple[int, int, Optional[PieceInstance]]]) -> Board:
    """Apply all (row, col, piece) updates at once; later updates win."""
    rows: dict[int, List[Optional[PieceInstance]]] = {}
    for row, col, piece in updates:
        if row not in rows:
            rows[row] = list(board.grid[row])
        rows[row][col] = piece
    if not rows:
        return board
    grid = tuple(tuple(rows[r]) if r in rows else board.grid[r] for r in range(board.height))
    return Board(width=board.width, height=board.height, grid=grid)


def clear_cells(board: Board, positions: Iterable[Position]) -> Board:
    return set_pieces(board, [(row, col, None) for row, col in positions])


def iter_occupied(board: Board) -> Iterator[Cell]:
    for row, values in enumerate(board.grid):
        for col, piece in enumerate(values):
            if piece is not None:
                yield Cell(row, col, piece)


def occupied_cells(board: Board) -> List[Cell]:
    return list(iter_occupied(board))


def count_remaining(board: Board) -> int:
    return sum(1 for _ in iter_occupied(board))


def board_to_text(board: Board, kinds: Mapping[int, PieceKind] | None = None) -> str:
    """Render a plain-text snapshot, one line per row, ``..`` for empty cells."""
    lines = []
    for values in board.grid:
        tokens = []
        for piece in values:
            if piece is None:
                tokens.append('..')
            elif kinds is not None and piece.kind_id in kinds:
                tokens.append(kinds[piece.kind_id].code)
            else:
                tokens.append(f"{piece.kind_id:>2}")
        lines.append(' '.join(tokens))
    return '\n'.join(lines)
