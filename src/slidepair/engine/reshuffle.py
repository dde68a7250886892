from __future__ import annotations

import logging
import random

from slidepair.constants import MAX_RESHUFFLE_ATTEMPTS
from slidepair.engine.board import Board, occupied_cells, set_pieces
from slidepair.engine.catalog import PieceInstance
from slidepair.engine.pairs import has_pairs

logger = logging.getLogger(__name__)


def reshuffle_remaining_tiles(
    board: Board,
    rng: random.Random | None = None,
    *,
    max_attempts: int = MAX_RESHUFFLE_ATTEMPTS,
) -> Board:
    """Randomly reassign kinds over the occupied cells until a direct pair exists.

    Positions and instance ids stay where they are; only kind ids move. After
    ``max_attempts`` failed permutations the last one is returned anyway.
    """
    cells = occupied_cells(board)
    if not cells:
        return board
    rng = rng or random.Random()
    kind_ids = [cell.kind_id for cell in cells]

    candidate = board
    for _ in range(max(1, max_attempts)):
        rng.shuffle(kind_ids)
        candidate = set_pieces(
            board,
            [
                (cell.row, cell.col, PieceInstance(instance_id=cell.piece.instance_id, kind_id=kind_id))
                for cell, kind_id in zip(cells, kind_ids)
            ],
        )
        if has_pairs(candidate):
            return candidate
    logger.warning(
        "reshuffle found no direct pair in %d attempts; keeping last permutation (%d tiles)",
        max_attempts,
        len(cells),
    )
    return candidate
